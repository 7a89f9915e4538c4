from collections.abc import Iterator
from dataclasses import dataclass, field

from osm_area.lib.geo_utils import BoundingBox
from osm_area.models.element import Element, Member, Node, Relation, Way
from osm_area.models.element_pool import DanglingReference
from osm_area.models.element_type import ElementId, is_placeholder_id


@dataclass(frozen=True, slots=True)
class ClippedMember:
    """Relation member that lies outside the extract."""

    relation_id: ElementId
    member: Member


@dataclass(frozen=True, slots=True)
class AreaData:
    """
    Box-bounded extract, closed under references:

    - all nodes inside the bounding box,
    - all ways referencing at least one of those nodes, together with every node they reference,
    - all relations referencing an included node or way,
      and the relations referencing those (not applied recursively).

    AreaData owns its elements; ways and relations reference them by id,
    resolved through the mappings below.
    """

    bbox: BoundingBox
    nodes: dict[ElementId, Node]
    """Nodes keyed to their id."""
    ways: dict[ElementId, Way]
    """Ways keyed to their id."""
    relations: list[Relation]
    """Relations in discovery order."""
    clipped_members: tuple[ClippedMember, ...] = ()
    dropped: tuple[DanglingReference, ...] = ()
    """References dropped while resolving the source pool in lenient mode."""

    _relations_by_id: dict[ElementId, Relation] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, '_relations_by_id', {r.id: r for r in self.relations})

    @property
    def is_final(self) -> bool:
        """False when the extract contains placeholder (negative) ids."""
        return not any(is_placeholder_id(element.id) for element in self.elements())

    def get_relation(self, id: ElementId) -> Relation | None:
        return self._relations_by_id.get(id)

    def way_nodes(self, way: Way) -> list[Node]:
        """Resolve the nodes of an included way, in way order."""
        nodes = self.nodes
        return [nodes[node_id] for node_id in way.node_ids]

    def member_element(self, member: Member) -> Element:
        """Resolve a relation member to the included element."""
        type = member.type
        if type == 'node':
            return self.nodes[member.id]
        elif type == 'way':
            return self.ways[member.id]
        elif type == 'relation':
            return self._relations_by_id[member.id]
        raise NotImplementedError(f'Unsupported element type {type!r}')

    def elements(self) -> Iterator[Element]:
        yield from self.nodes.values()
        yield from self.ways.values()
        yield from self.relations

    def stats(self) -> dict[str, int]:
        return {
            'nodes': len(self.nodes),
            'ways': len(self.ways),
            'relations': len(self.relations),
            'clipped_members': len(self.clipped_members),
            'dropped': len(self.dropped),
        }
