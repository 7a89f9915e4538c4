from typing import NoReturn

from osm_area.exceptions.extract_error import DuplicateKeyError
from osm_area.models.element_ref import ElementRef


class TagsExceptionsMixin:
    def tags_duplicate_key(self, key: str, referrer: ElementRef | None = None) -> NoReturn:
        raise DuplicateKeyError(key, referrer)
