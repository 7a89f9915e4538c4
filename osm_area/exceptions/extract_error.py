from osm_area.models.element_ref import ElementRef


class ExtractError(Exception):
    pass


class DuplicateKeyError(ExtractError, ValueError):
    def __init__(self, key: str, referrer: ElementRef | None = None):
        self.key = key
        self.referrer = referrer
        where = f' on {referrer}' if referrer is not None else ''
        super().__init__(f'Duplicate tag key {key!r}{where}')


class DuplicateElementError(ExtractError, ValueError):
    def __init__(self, ref: ElementRef):
        self.ref = ref
        super().__init__(f'Element {ref} occurs more than once in the pool')


class DanglingReferenceError(ExtractError, LookupError):
    def __init__(self, referrer: ElementRef, missing: ElementRef):
        self.referrer = referrer
        self.missing = missing
        super().__init__(f'{referrer} references missing {missing}')


class InvariantViolation(ExtractError):  # noqa: N818
    pass


class BadBBoxError(ExtractError, ValueError):
    def __init__(self, value: str, reason: str | None = None):
        self.value = value
        self.reason = reason
        detail = f': {reason}' if reason else ''
        super().__init__(f'Invalid bounding box {value!r}{detail}')


class AreaTooLargeError(ExtractError):
    pass
