from collections.abc import Collection

import pytest

from osm_area.lib.geo_utils import BoundingBox
from osm_area.models.element import Member, Node, Relation, Way
from osm_area.models.element_pool import ElementPool
from osm_area.models.element_type import ElementId
from osm_area.models.tags import TagMap


def pytest_addoption(parser):
    parser.addoption(
        '--extended',
        action='store_true',
        default=False,
        help='run extended tests',
    )


def pytest_configure(config):
    config.addinivalue_line('markers', 'extended: mark test as part of the extended test suite')


def pytest_collection_modifyitems(config: pytest.Config, items: Collection[pytest.Item]):
    # skip extended tests by default
    if not config.getoption('--extended'):
        skip_marker = pytest.mark.skip(reason='need --extended option to run')
        for item in items:
            if 'extended' in item.keywords:
                item.add_marker(skip_marker)


@pytest.fixture
def bbox() -> BoundingBox:
    return BoundingBox(0.0, 0.0, 1.0, 1.0)


@pytest.fixture
def simple_pool() -> ElementPool:
    """
    n1 inside the box, n2 outside,
    w1 = [n1, n2], r1 references w1.
    """
    return ElementPool.from_elements([
        Node(ElementId(1), 0.5, 0.5),
        Node(ElementId(2), 5.0, 5.0),
        Way(ElementId(1), (ElementId(1), ElementId(2)), tags=TagMap({'highway': 'residential'})),
        Relation(ElementId(1), (Member('way', ElementId(1), 'outer'),), tags=TagMap({'type': 'multipolygon'})),
    ])
