from dataclasses import dataclass, field
from datetime import datetime

from osm_area.models.element_ref import ElementMemberRef, ElementRef
from osm_area.models.element_type import ElementId, ElementType
from osm_area.models.tags import TaggedMixin, TagMap

Member = ElementMemberRef


@dataclass(frozen=True, slots=True)
class Node(TaggedMixin):
    """
    Single point in space, WGS84 degrees.

    At the poles the longitude is an arbitrary value within range.
    """

    id: ElementId
    lat: float
    lon: float
    ele: float | None = None
    timestamp: datetime | None = None
    tags: TagMap = field(default_factory=TagMap)

    type: ElementType = field(default='node', init=False, repr=False)

    @property
    def ref(self) -> ElementRef:
        return ElementRef('node', self.id)

    @property
    def point(self) -> tuple[float, float]:
        """Coordinates as (lat, lon)."""
        return self.lat, self.lon


@dataclass(frozen=True, slots=True)
class Way(TaggedMixin):
    """
    Ordered sequence of node references.

    Normally 2 to 2,000 nodes, but faulty ways with zero or one node exist in the wild.
    """

    id: ElementId
    node_ids: tuple[ElementId, ...]
    timestamp: datetime | None = None
    tags: TagMap = field(default_factory=TagMap)

    type: ElementType = field(default='way', init=False, repr=False)

    @property
    def ref(self) -> ElementRef:
        return ElementRef('way', self.id)

    @property
    def is_closed(self) -> bool:
        """
        A closed way ends on the node it starts with, and may denote an area.

        >>> Way(1, (5, 6, 7, 5)).is_closed
        True
        """
        node_ids = self.node_ids
        return bool(node_ids) and node_ids[0] == node_ids[-1]

    @property
    def node_refs(self) -> tuple[ElementRef, ...]:
        return tuple(ElementRef('node', node_id) for node_id in self.node_ids)


@dataclass(frozen=True, slots=True)
class Relation(TaggedMixin):
    id: ElementId
    members: tuple[Member, ...]
    timestamp: datetime | None = None
    tags: TagMap = field(default_factory=TagMap)

    type: ElementType = field(default='relation', init=False, repr=False)

    @property
    def ref(self) -> ElementRef:
        return ElementRef('relation', self.id)

    def members_by_role(self, role: str) -> tuple[Member, ...]:
        return tuple(member for member in self.members if member.role == role)


type Element = Node | Way | Relation
