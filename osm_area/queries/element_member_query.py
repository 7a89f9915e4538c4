import logging
from dataclasses import replace
from typing import Literal

from osm_area.config import DANGLING_REFERENCE_POLICY, ELEMENT_WAY_MEMBERS_LIMIT
from osm_area.lib.exceptions_context import raise_for
from osm_area.models.element import Relation, Way
from osm_area.models.element_pool import DanglingReference, ElementPool, ResolvedPool
from osm_area.models.element_ref import ElementRef
from osm_area.models.element_type import ElementId

DanglingReferencePolicy = Literal['strict', 'lenient']


class ElementMemberQuery:
    @staticmethod
    def resolve_members(
        pool: ElementPool,
        *,
        policy: DanglingReferencePolicy | None = None,
    ) -> ResolvedPool:
        """
        Validate every way->node and relation->member reference against the pool.

        In 'strict' mode a missing reference raises DanglingReferenceError.
        In 'lenient' mode the reference is removed from its referrer and
        reported in ResolvedPool.dropped.

        Ways without nodes are passed through and reported in ResolvedPool.malformed_ways.
        """
        if policy is None:
            policy = DANGLING_REFERENCE_POLICY
        strict = policy == 'strict'

        nodes = pool.nodes
        dropped: list[DanglingReference] = []
        malformed_ways: list[ElementId] = []

        ways: dict[ElementId, Way] = {}
        for way_id, way in pool.ways.items():
            node_ids = way.node_ids
            if not node_ids:
                logging.warning('way/%d has no nodes', way_id)
                malformed_ways.append(way_id)
                ways[way_id] = way
                continue
            if len(node_ids) > ELEMENT_WAY_MEMBERS_LIMIT:
                logging.warning('way/%d has %d nodes, above the limit of %d', way_id, len(node_ids), ELEMENT_WAY_MEMBERS_LIMIT)

            missing = [node_id for node_id in node_ids if node_id not in nodes]
            if not missing:
                ways[way_id] = way
                continue

            if strict:
                raise_for.element_member_not_found(way.ref, ElementRef('node', missing[0]))

            missing_set = set(missing)
            for node_id in missing:
                dropped.append(DanglingReference(way.ref, ElementRef('node', node_id)))
            logging.debug('way/%d has %d missing nodes', way_id, len(missing))
            way = replace(way, node_ids=tuple(n for n in node_ids if n not in missing_set))
            if not way.node_ids:
                malformed_ways.append(way_id)
            ways[way_id] = way

        relations: dict[ElementId, Relation] = {}
        for relation_id, relation in pool.relations.items():
            members = relation.members
            missing_refs = [m.ref for m in members if m.ref not in pool]
            if not missing_refs:
                relations[relation_id] = relation
                continue

            if strict:
                raise_for.element_member_not_found(relation.ref, missing_refs[0])

            missing_ref_set = set(missing_refs)
            for missing_ref in missing_refs:
                dropped.append(DanglingReference(relation.ref, missing_ref))
            logging.debug('relation/%d has %d missing members', relation_id, len(missing_refs))
            relations[relation_id] = replace(
                relation,
                members=tuple(m for m in members if m.ref not in missing_ref_set),
            )

        if dropped:
            logging.info('Dropped %d dangling references', len(dropped))

        return ResolvedPool(
            pool=ElementPool(nodes=dict(nodes), ways=ways, relations=relations),
            dropped=tuple(dropped),
            malformed_ways=tuple(malformed_ways),
        )
