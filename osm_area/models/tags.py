import logging
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Literal, Protocol, override

from osm_area.config import DUPLICATE_TAG_POLICY
from osm_area.lib.exceptions_context import raise_for
from osm_area.models.element_ref import ElementRef
from osm_area.validators.tags import TagPairsValidator

DuplicateTagPolicy = Literal['reject', 'last_write_wins']


class _NoValue(Enum):
    token = 'NO_VALUE'

    @override
    def __repr__(self) -> str:
        return 'NO_VALUE'

    def __bool__(self) -> bool:
        return False


NO_VALUE = _NoValue.token
"""Returned by tag lookups when the key is present but carries no value."""

type TagLookup = str | Literal[_NoValue.token] | None


class TagMap(Mapping[str, str | None]):
    """
    Immutable tag store of one element.

    Keys are unique. A key may be present without a value, which is
    distinct from the key being absent:

    >>> tags = TagMap({'access': 'private', 'name': None})
    >>> tags.get_tag('access'), tags.get_tag('name'), tags.get_tag('missing')
    ('private', NO_VALUE, None)
    """

    __slots__ = ('_data',)

    def __init__(self, data: Mapping[str, str | None] | None = None, /) -> None:
        self._data: dict[str, str | None] = dict(data) if data else {}

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, str | None]],
        *,
        policy: DuplicateTagPolicy | None = None,
        referrer: ElementRef | None = None,
    ) -> 'TagMap':
        """
        Build a tag store from raw (key, value) pairs.

        Under the 'reject' policy a repeated key raises DuplicateKeyError.
        Under 'last_write_wins' the last value is kept and a warning is logged.
        """
        if policy is None:
            policy = DUPLICATE_TAG_POLICY

        validated = TagPairsValidator.validate_python([(key, value) for key, value in pairs])
        data: dict[str, str | None] = {}
        for key, value in validated:
            if key in data:
                if policy == 'reject':
                    raise_for.tags_duplicate_key(key, referrer)
                logging.warning(
                    'Duplicate tag key %r on %s, keeping the last value',
                    key,
                    referrer if referrer is not None else 'element',
                )
            data[key] = value

        return cls(data)

    def get_tag(self, key: str) -> TagLookup:
        """
        Get the tag value.

        Returns NO_VALUE if the key is present without a value and None if the key is absent.
        """
        data = self._data
        if key not in data:
            return None
        value = data[key]
        return NO_VALUE if value is None else value

    def has_tag(self, key: str) -> bool:
        """Check whether the key is present, regardless of its value."""
        return key in self._data

    @override
    def __getitem__(self, key: str) -> str | None:
        return self._data[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    @override
    def __len__(self) -> int:
        return len(self._data)

    @override
    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    @override
    def __repr__(self) -> str:
        return f'TagMap({self._data!r})'


class Tagged(Protocol):
    def get_tag(self, key: str) -> TagLookup: ...

    def has_tag(self, key: str) -> bool: ...


class TaggedMixin:
    """Tag queries shared by all element kinds; expects a `tags` attribute."""

    __slots__ = ()

    tags: TagMap

    def get_tag(self, key: str) -> TagLookup:
        return self.tags.get_tag(key)

    def has_tag(self, key: str) -> bool:
        return self.tags.has_tag(key)
