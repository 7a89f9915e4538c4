from datetime import datetime
from typing import Annotated, NotRequired, TypedDict

from annotated_types import Ge, Le, MaxLen
from pydantic import AfterValidator, TypeAdapter

from osm_area.config import ELEMENT_RELATION_MEMBERS_LIMIT, PYDANTIC_CONFIG
from osm_area.models.element_type import ElementType
from osm_area.validators.tags import TagKey, TagValue
from osm_area.validators.unicode import UnicodeValidator, XMLSafeValidator


def _validate_element_id(v: int) -> int:
    if v == 0:
        raise ValueError('Element id cannot be 0')
    return v


ElementIdValidating = Annotated[int, AfterValidator(_validate_element_id)]

RoleValidating = Annotated[str, UnicodeValidator, MaxLen(255), XMLSafeValidator]

TagPairs = list[tuple[TagKey, TagValue | None]]


class NodeInit(TypedDict):
    id: ElementIdValidating
    lat: Annotated[float, Ge(-90), Le(90)]
    lon: Annotated[float, Ge(-180), Le(180)]
    ele: NotRequired[float | None]
    timestamp: NotRequired[datetime | None]
    tags: NotRequired[TagPairs | None]


class WayInit(TypedDict):
    id: ElementIdValidating
    nodes: list[ElementIdValidating]
    timestamp: NotRequired[datetime | None]
    tags: NotRequired[TagPairs | None]


class RelationInit(TypedDict):
    id: ElementIdValidating
    members: Annotated[
        list[tuple[ElementType, ElementIdValidating, RoleValidating]],
        MaxLen(ELEMENT_RELATION_MEMBERS_LIMIT),
    ]
    timestamp: NotRequired[datetime | None]
    tags: NotRequired[TagPairs | None]


NodeInitListValidator = TypeAdapter(list[NodeInit], config=PYDANTIC_CONFIG)
WayInitListValidator = TypeAdapter(list[WayInit], config=PYDANTIC_CONFIG)
RelationInitListValidator = TypeAdapter(list[RelationInit], config=PYDANTIC_CONFIG)
