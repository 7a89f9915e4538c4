from typing import NoReturn

from osm_area.exceptions.extract_error import DanglingReferenceError, DuplicateElementError
from osm_area.models.element_ref import ElementRef


class ElementExceptionsMixin:
    def element_duplicate(self, ref: ElementRef) -> NoReturn:
        raise DuplicateElementError(ref)

    def element_member_not_found(self, parent_ref: ElementRef, member_ref: ElementRef) -> NoReturn:
        raise DanglingReferenceError(parent_ref, member_ref)
