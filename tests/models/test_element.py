from dataclasses import FrozenInstanceError

import pytest

from osm_area.models.element import Member, Node, Relation, Way
from osm_area.models.element_ref import ElementRef
from osm_area.models.element_type import ElementId
from osm_area.models.tags import NO_VALUE, TagMap


def test_node():
    node = Node(ElementId(1), 51.5, -0.1, tags=TagMap({'name': 'London', 'capital': None}))
    assert node.type == 'node'
    assert node.ref == ElementRef('node', ElementId(1))
    assert node.point == (51.5, -0.1)
    assert node.get_tag('name') == 'London'
    assert node.get_tag('capital') is NO_VALUE
    assert node.get_tag('population') is None
    assert node.has_tag('capital')


def test_node_default_tags():
    node = Node(ElementId(1), 0.0, 0.0)
    assert len(node.tags) == 0
    assert node.ele is None
    assert node.timestamp is None


def test_element_frozen():
    node = Node(ElementId(1), 0.0, 0.0)
    with pytest.raises(FrozenInstanceError):
        node.lat = 1.0  # type: ignore[misc]


@pytest.mark.parametrize(
    ('node_ids', 'expected'),
    [
        ((), False),
        ((1,), True),
        ((1, 2), False),
        ((1, 2, 3, 1), True),
    ],
)
def test_way_is_closed(node_ids, expected):
    assert Way(ElementId(1), node_ids).is_closed == expected


def test_way_node_refs():
    way = Way(ElementId(3), (ElementId(1), ElementId(2)))
    assert way.type == 'way'
    assert way.ref == ElementRef('way', ElementId(3))
    assert way.node_refs == (ElementRef('node', ElementId(1)), ElementRef('node', ElementId(2)))


def test_relation_members():
    relation = Relation(
        ElementId(5),
        (
            Member('way', ElementId(1), 'outer'),
            Member('way', ElementId(2), 'inner'),
            Member('way', ElementId(3), 'outer'),
        ),
        tags=TagMap({'type': 'multipolygon'}),
    )
    assert relation.type == 'relation'
    assert relation.ref == ElementRef('relation', ElementId(5))
    assert [m.id for m in relation.members_by_role('outer')] == [1, 3]
    assert relation.members_by_role('label') == ()
    assert relation.members[0].ref == ElementRef('way', ElementId(1))


def test_element_equality():
    assert Node(ElementId(1), 0.0, 0.0, tags=TagMap({'a': '1'})) == Node(ElementId(1), 0.0, 0.0, tags=TagMap({'a': '1'}))
    assert Node(ElementId(1), 0.0, 0.0) != Node(ElementId(1), 0.0, 1.0)
    assert hash(Way(ElementId(1), (ElementId(1),))) == hash(Way(ElementId(1), (ElementId(1),)))
