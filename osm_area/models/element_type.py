from typing import Literal, NewType, get_args

ElementType = Literal['node', 'way', 'relation']
ElementId = NewType('ElementId', int)
"""Positive ids are persistent, negative ids are placeholders valid within one creation batch."""

ELEMENT_TYPES: tuple[ElementType, ...] = get_args(ElementType)


def element_type(s: str) -> ElementType:
    """
    Get the element type from the given string.

    >>> element_type('node')
    'node'
    >>> element_type('w123')
    'way'
    """
    if not s:
        raise ValueError('Element type cannot be empty')

    c = s[0]
    if c == 'n':
        return 'node'
    elif c == 'w':
        return 'way'
    elif c == 'r':
        return 'relation'
    else:
        raise ValueError(f'Unknown element type {s!r}')


def is_placeholder_id(id: int) -> bool:
    """
    Check whether the id is an ephemeral (negative) placeholder.

    >>> is_placeholder_id(-5)
    True
    """
    return id < 0
