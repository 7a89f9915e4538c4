import logging
from dataclasses import replace

import cython
import numpy as np

from osm_area.config import MAP_QUERY_AREA_MAX_SIZE, MAP_QUERY_NODES_LIMIT
from osm_area.lib.exceptions_context import raise_for
from osm_area.lib.geo_utils import BoundingBox, normalize_bbox, parse_bbox
from osm_area.models.area_data import AreaData, ClippedMember
from osm_area.models.element import Member, Node, Relation, Way
from osm_area.models.element_pool import ElementPool, ResolvedPool
from osm_area.models.element_ref import ElementRef
from osm_area.models.element_type import ElementId
from osm_area.queries.element_member_query import DanglingReferencePolicy, ElementMemberQuery


class AreaQuery:
    @staticmethod
    def find_by_bbox(
        pool: ResolvedPool | ElementPool,
        bbox: BoundingBox | str,
        *,
        nodes_limit: int | None = None,
    ) -> AreaData:
        """
        Find the closure-consistent extract of the pool within the bounding box.

        The matching is performed on the nodes only and related elements are returned:
        - nodes inside the box (bounds inclusive)
        - nodes' ways
        - nodes' ways' nodes, even outside the box
        - relations referencing any of the above
        - relations referencing those relations -- not applied recursively

        The pool is expected to be resolved (see ElementMemberQuery.resolve_members);
        a reference that cannot be found raises InvariantViolation.
        """
        # boxes built by hand may lie outside [-180, 180) or be inverted
        bbox = parse_bbox(bbox) if isinstance(bbox, str) else normalize_bbox(*bbox)
        if MAP_QUERY_AREA_MAX_SIZE is not None and bbox.area > MAP_QUERY_AREA_MAX_SIZE:
            raise_for.map_query_area_too_big(bbox.area)
        if nodes_limit is None:
            nodes_limit = MAP_QUERY_NODES_LIMIT

        if isinstance(pool, ResolvedPool):
            dropped = pool.dropped
            pool = pool.pool
        else:
            dropped = ()

        seed_ids = _find_seed_node_ids(pool.nodes, bbox)
        if nodes_limit is not None and len(seed_ids) > nodes_limit:
            raise_for.map_query_nodes_limit_exceeded(nodes_limit)

        nodes, ways = _expand_ways(pool, seed_ids)
        relations = _find_relations(pool, nodes, ways)
        relations, clipped = _clip_relations(pool, nodes, ways, relations)

        result = AreaData(
            bbox=bbox,
            nodes=nodes,
            ways=ways,
            relations=relations,
            clipped_members=clipped,
            dropped=dropped,
        )
        logging.info(
            'Extracted %d nodes (%d seed), %d ways, %d relations within %s',
            len(nodes),
            len(seed_ids),
            len(ways),
            len(relations),
            bbox,
        )
        if not result.is_final:
            logging.debug('Extract within %s contains placeholder ids', bbox)
        return result

    @staticmethod
    def extract(
        pool: ElementPool,
        bbox: BoundingBox | str,
        *,
        policy: DanglingReferencePolicy | None = None,
        nodes_limit: int | None = None,
    ) -> AreaData:
        """Resolve the pool references and find the extract within the bounding box."""
        resolved = ElementMemberQuery.resolve_members(pool, policy=policy)
        return AreaQuery.find_by_bbox(resolved, bbox, nodes_limit=nodes_limit)


@cython.cfunc
def _find_seed_node_ids(pool_nodes: dict[ElementId, Node], bbox: BoundingBox) -> list[ElementId]:
    count = len(pool_nodes)
    if not count:
        return []

    nodes = pool_nodes.values()
    ids = np.fromiter(pool_nodes.keys(), dtype=np.int64, count=count)
    lats = np.fromiter((node.lat for node in nodes), dtype=np.float64, count=count)
    lons = np.fromiter((node.lon for node in nodes), dtype=np.float64, count=count)
    return ids[bbox.contains_mask(lats, lons)].tolist()


@cython.cfunc
def _expand_ways(
    pool: ElementPool,
    seed_ids: list[ElementId],
) -> tuple[dict[ElementId, Node], dict[ElementId, Way]]:
    pool_nodes = pool.nodes
    nodes: dict[ElementId, Node] = {node_id: pool_nodes[node_id] for node_id in seed_ids}
    ways: dict[ElementId, Way] = {}

    seed_set = frozenset(seed_ids)
    if not seed_set:
        return nodes, ways

    for way_id, way in pool.ways.items():
        node_ids = way.node_ids
        if seed_set.isdisjoint(node_ids):
            continue

        ways[way_id] = way

        # full node closure for included ways
        for node_id in node_ids:
            if node_id in nodes:
                continue
            node = pool_nodes.get(node_id)
            if node is None:
                raise_for.map_query_missing_member(way.ref, ElementRef('node', node_id))
            nodes[node_id] = node

    return nodes, ways


@cython.cfunc
def _find_relations(
    pool: ElementPool,
    nodes: dict[ElementId, Node],
    ways: dict[ElementId, Way],
) -> list[Relation]:
    direct: list[Relation] = []
    direct_ids: set[ElementId] = set()
    remaining: list[Relation] = []

    for relation in pool.relations.values():
        for member in relation.members:
            type = member.type
            if (type == 'node' and member.id in nodes) or (type == 'way' and member.id in ways):
                direct.append(relation)
                direct_ids.add(relation.id)
                break
        else:
            remaining.append(relation)

    # single extra level, relations discovered here do not pull in more relations
    parents: list[Relation] = [
        relation
        for relation in remaining
        if any(member.type == 'relation' and member.id in direct_ids for member in relation.members)
    ]

    logging.debug('Found %d direct and %d parent relations', len(direct), len(parents))
    return direct + parents


@cython.cfunc
def _clip_relations(
    pool: ElementPool,
    nodes: dict[ElementId, Node],
    ways: dict[ElementId, Way],
    relations: list[Relation],
) -> tuple[list[Relation], tuple[ClippedMember, ...]]:
    included_relation_ids = {relation.id for relation in relations}
    result: list[Relation] = []
    clipped: list[ClippedMember] = []

    for relation in relations:
        kept: list[Member] = []
        for member in relation.members:
            type = member.type
            if (
                (type == 'node' and member.id in nodes)
                or (type == 'way' and member.id in ways)
                or (type == 'relation' and member.id in included_relation_ids)
            ):
                kept.append(member)
                continue
            if member.ref not in pool:
                raise_for.map_query_missing_member(relation.ref, member.ref)
            clipped.append(ClippedMember(relation.id, member))

        if not kept:
            raise_for.map_query_orphan_relation(relation.ref)

        if len(kept) == len(relation.members):
            result.append(relation)
        else:
            result.append(replace(relation, members=tuple(kept)))

    return result, tuple(clipped)
