from typing import NoReturn

from osm_area.config import MAP_QUERY_AREA_MAX_SIZE
from osm_area.exceptions.extract_error import AreaTooLargeError, BadBBoxError, InvariantViolation
from osm_area.models.element_ref import ElementRef


class MapExceptionsMixin:
    def bad_bbox(self, bbox: str, condition: str | None = None) -> NoReturn:
        raise BadBBoxError(bbox, condition)

    def map_query_area_too_big(self, area: float) -> NoReturn:
        raise AreaTooLargeError(
            f'The maximum bbox size is {MAP_QUERY_AREA_MAX_SIZE}, and the requested area was {area:.4f}'
        )

    def map_query_nodes_limit_exceeded(self, limit: int) -> NoReturn:
        raise AreaTooLargeError(f'The bbox contains more than {limit} nodes')

    def map_query_missing_member(self, parent_ref: ElementRef, member_ref: ElementRef) -> NoReturn:
        raise InvariantViolation(f'{parent_ref} references {member_ref} which is not in the pool; resolve the pool first')

    def map_query_orphan_relation(self, relation_ref: ElementRef) -> NoReturn:
        raise InvariantViolation(f'{relation_ref} was included without any member in the extract')
