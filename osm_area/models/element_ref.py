from typing import NamedTuple

from osm_area.models.element_type import ElementId, ElementType, element_type


class ElementRef(NamedTuple):
    type: ElementType
    id: ElementId

    @classmethod
    def from_str(cls, s: str) -> 'ElementRef':
        """
        Parse an element reference from a string representation.

        >>> ElementRef.from_str('n123')
        ElementRef(type='node', id=123)
        """
        type = element_type(s)
        id = int(s[1:])

        if id == 0:
            raise ValueError('Element id cannot be 0')

        return cls(type, ElementId(id))

    def __str__(self) -> str:
        """
        Produce a string representation of the element reference.

        >>> str(ElementRef('node', 123))
        'n123'
        """
        return f'{self.type[0]}{self.id}'


class ElementMemberRef(NamedTuple):
    type: ElementType
    id: ElementId
    role: str = ''

    @property
    def ref(self) -> ElementRef:
        return ElementRef(self.type, self.id)

    def __str__(self) -> str:
        """
        >>> str(ElementMemberRef('way', 5, 'outer'))
        'w5:outer'
        """
        return f'{self.type[0]}{self.id}:{self.role}'
