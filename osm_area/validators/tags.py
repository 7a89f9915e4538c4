from typing import Annotated

from annotated_types import MaxLen, MinLen
from pydantic import AfterValidator, TypeAdapter

from osm_area.config import PYDANTIC_CONFIG, TAGS_KEY_MAX_LENGTH, TAGS_LIMIT, TAGS_VALUE_MAX_LENGTH
from osm_area.validators.unicode import UnicodeValidator, XMLSafeValidator

TagKey = Annotated[
    str,
    UnicodeValidator,
    MinLen(1),
    MaxLen(TAGS_KEY_MAX_LENGTH),
    XMLSafeValidator,
]

TagValue = Annotated[
    str,
    UnicodeValidator,
    MaxLen(TAGS_VALUE_MAX_LENGTH),
    XMLSafeValidator,
]


def _validate_tags_count(v: list[tuple[str, str | None]]) -> list[tuple[str, str | None]]:
    if len(v) > TAGS_LIMIT:
        raise ValueError(f'Cannot have more than {TAGS_LIMIT} tags')
    return v


# pairs rather than a dict, so that duplicate keys survive until the tag store sees them
TagPairsValidating = Annotated[
    list[tuple[TagKey, TagValue | None]],
    AfterValidator(_validate_tags_count),
]

TagPairsValidator = TypeAdapter(TagPairsValidating, config=PYDANTIC_CONFIG)
