import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from osm_area.lib.exceptions_context import raise_for
from osm_area.models.element import Element, Member, Node, Relation, Way
from osm_area.models.element_ref import ElementRef
from osm_area.models.element_type import ElementId, ElementType
from osm_area.models.tags import DuplicateTagPolicy, TagMap
from osm_area.validators.element import (
    NodeInit,
    NodeInitListValidator,
    RelationInit,
    RelationInitListValidator,
    WayInit,
    WayInitListValidator,
)


@dataclass(slots=True)
class ElementPool:
    """
    Flat set of raw elements, keyed by id within each kind.

    Ways and relations reference their constituents by id only.
    """

    nodes: dict[ElementId, Node] = field(default_factory=dict)
    ways: dict[ElementId, Way] = field(default_factory=dict)
    relations: dict[ElementId, Relation] = field(default_factory=dict)

    @classmethod
    def from_elements(cls, elements: Iterable[Element]) -> 'ElementPool':
        """Build a pool from element instances, rejecting repeated ids within a kind."""
        pool = cls()
        for element in elements:
            pool.add(element)
        return pool

    @classmethod
    def from_raw(
        cls,
        nodes: Sequence[NodeInit] = (),
        ways: Sequence[WayInit] = (),
        relations: Sequence[RelationInit] = (),
        *,
        tags_policy: DuplicateTagPolicy | None = None,
    ) -> 'ElementPool':
        """
        Validate raw element dicts and build a pool from them.

        >>> len(ElementPool.from_raw(nodes=[{'id': 1, 'lat': 0.0, 'lon': 0.0}]))
        1
        """
        pool = cls()

        for n in NodeInitListValidator.validate_python(list(nodes)):
            ref = ElementRef('node', ElementId(n['id']))
            pool.add(
                Node(
                    id=ref.id,
                    lat=n['lat'],
                    lon=n['lon'],
                    ele=n.get('ele'),
                    timestamp=n.get('timestamp'),
                    tags=_tags(n.get('tags'), tags_policy, ref),
                )
            )

        for w in WayInitListValidator.validate_python(list(ways)):
            ref = ElementRef('way', ElementId(w['id']))
            pool.add(
                Way(
                    id=ref.id,
                    node_ids=tuple(ElementId(node_id) for node_id in w['nodes']),
                    timestamp=w.get('timestamp'),
                    tags=_tags(w.get('tags'), tags_policy, ref),
                )
            )

        for r in RelationInitListValidator.validate_python(list(relations)):
            ref = ElementRef('relation', ElementId(r['id']))
            pool.add(
                Relation(
                    id=ref.id,
                    members=tuple(Member(type, ElementId(id), role) for type, id, role in r['members']),
                    timestamp=r.get('timestamp'),
                    tags=_tags(r.get('tags'), tags_policy, ref),
                )
            )

        logging.debug(
            'Built element pool with %d nodes, %d ways, %d relations',
            len(pool.nodes),
            len(pool.ways),
            len(pool.relations),
        )
        return pool

    def add(self, element: Element) -> None:
        mapping = self._mapping(element.type)
        if element.id in mapping:
            raise_for.element_duplicate(element.ref)
        mapping[element.id] = element  # type: ignore[assignment]

    def get(self, ref: ElementRef) -> Element | None:
        return self._mapping(ref.type).get(ref.id)

    def __contains__(self, ref: ElementRef) -> bool:
        return ref.id in self._mapping(ref.type)

    def __iter__(self) -> Iterator[Element]:
        yield from self.nodes.values()
        yield from self.ways.values()
        yield from self.relations.values()

    def __len__(self) -> int:
        return len(self.nodes) + len(self.ways) + len(self.relations)

    def _mapping(self, type: ElementType) -> dict[ElementId, Node] | dict[ElementId, Way] | dict[ElementId, Relation]:
        if type == 'node':
            return self.nodes
        elif type == 'way':
            return self.ways
        elif type == 'relation':
            return self.relations
        raise NotImplementedError(f'Unsupported element type {type!r}')


@dataclass(frozen=True, slots=True)
class DanglingReference:
    referrer: ElementRef
    missing: ElementRef

    def __str__(self) -> str:
        return f'{self.referrer} -> {self.missing}'


@dataclass(frozen=True, slots=True)
class ResolvedPool:
    """Pool in which every way->node and relation->member reference resolves."""

    pool: ElementPool
    dropped: tuple[DanglingReference, ...] = ()
    malformed_ways: tuple[ElementId, ...] = ()


def _tags(
    pairs: list[tuple[str, str | None]] | None,
    policy: DuplicateTagPolicy | None,
    referrer: ElementRef,
) -> TagMap:
    if not pairs:
        return TagMap()
    return TagMap.from_pairs(pairs, policy=policy, referrer=referrer)
