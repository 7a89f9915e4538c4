import logging

import pytest

from osm_area.exceptions.extract_error import DanglingReferenceError
from osm_area.models.element import Member, Node, Relation, Way
from osm_area.models.element_pool import DanglingReference, ElementPool
from osm_area.models.element_ref import ElementRef
from osm_area.models.element_type import ElementId
from osm_area.queries.element_member_query import ElementMemberQuery


@pytest.fixture
def dangling_pool() -> ElementPool:
    return ElementPool.from_elements([
        Node(ElementId(1), 0.5, 0.5),
        Way(ElementId(1), (ElementId(1), ElementId(99))),
        Way(ElementId(2), (ElementId(98),)),
        Relation(
            ElementId(1),
            (
                Member('way', ElementId(1), 'outer'),
                Member('way', ElementId(50), 'inner'),
                Member('relation', ElementId(7)),
            ),
        ),
    ])


def test_resolve_members_complete(simple_pool):
    resolved = ElementMemberQuery.resolve_members(simple_pool)
    assert resolved.dropped == ()
    assert resolved.malformed_ways == ()
    assert resolved.pool.ways == simple_pool.ways
    assert resolved.pool.relations == simple_pool.relations


def test_resolve_members_strict(dangling_pool):
    with pytest.raises(DanglingReferenceError) as e:
        ElementMemberQuery.resolve_members(dangling_pool, policy='strict')
    assert e.value.referrer == ElementRef('way', ElementId(1))
    assert e.value.missing == ElementRef('node', ElementId(99))


def test_resolve_members_strict_relation():
    pool = ElementPool.from_elements([
        Node(ElementId(1), 0.0, 0.0),
        Relation(ElementId(3), (Member('node', ElementId(1)), Member('way', ElementId(4)))),
    ])
    with pytest.raises(DanglingReferenceError) as e:
        ElementMemberQuery.resolve_members(pool)
    assert e.value.referrer == ElementRef('relation', ElementId(3))
    assert e.value.missing == ElementRef('way', ElementId(4))


def test_resolve_members_lenient(dangling_pool, caplog):
    with caplog.at_level(logging.INFO):
        resolved = ElementMemberQuery.resolve_members(dangling_pool, policy='lenient')

    pool = resolved.pool
    assert pool.ways[1].node_ids == (1,)
    assert pool.ways[2].node_ids == ()
    assert pool.relations[1].members == (Member('way', ElementId(1), 'outer'),)
    assert resolved.dropped == (
        DanglingReference(ElementRef('way', ElementId(1)), ElementRef('node', ElementId(99))),
        DanglingReference(ElementRef('way', ElementId(2)), ElementRef('node', ElementId(98))),
        DanglingReference(ElementRef('relation', ElementId(1)), ElementRef('way', ElementId(50))),
        DanglingReference(ElementRef('relation', ElementId(1)), ElementRef('relation', ElementId(7))),
    )
    assert resolved.malformed_ways == (2,)
    assert 'Dropped 4 dangling references' in caplog.text

    # the source pool is left untouched
    assert dangling_pool.ways[1].node_ids == (1, 99)


def test_resolve_members_malformed_way(caplog):
    pool = ElementPool.from_elements([Way(ElementId(1), ())])
    with caplog.at_level(logging.WARNING):
        resolved = ElementMemberQuery.resolve_members(pool)
    assert resolved.malformed_ways == (1,)
    assert resolved.pool.ways[1].node_ids == ()
    assert 'way/1 has no nodes' in caplog.text


def test_resolve_members_self_reference():
    pool = ElementPool.from_elements([Relation(ElementId(1), (Member('relation', ElementId(1)),))])
    resolved = ElementMemberQuery.resolve_members(pool)
    assert resolved.dropped == ()
