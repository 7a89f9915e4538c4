from datetime import UTC, datetime

import orjson
import pytest
from pydantic import ValidationError

from osm_area.format import Format
from osm_area.models.element import Member
from osm_area.models.element_type import ElementId

_RESPONSE = {
    'version': 0.6,
    'generator': 'Overpass API',
    'elements': [
        {
            'type': 'node',
            'id': 1,
            'lat': 50.0,
            'lon': 19.9,
            'timestamp': '2024-05-01T12:00:00Z',
            'tags': {'natural': 'peak', 'ele': '1234.5'},
        },
        {'type': 'node', 'id': 2, 'lat': 50.1, 'lon': 20},
        {'type': 'way', 'id': 10, 'nodes': [1, 2], 'tags': {'highway': 'path'}},
        {
            'type': 'relation',
            'id': 100,
            'members': [
                {'type': 'way', 'ref': 10, 'role': 'outer'},
                {'type': 'node', 'ref': 1, 'role': ''},
            ],
            'tags': {'type': 'multipolygon'},
        },
        {'type': 'area', 'id': 3600000001},
    ],
}


@pytest.mark.parametrize('serialize', [lambda d: d, orjson.dumps, lambda d: orjson.dumps(d).decode()])
def test_decode_overpass(serialize):
    pool = Format.decode_overpass(serialize(_RESPONSE))
    assert len(pool) == 4

    peak = pool.nodes[1]
    assert peak.ele == 1234.5
    assert peak.timestamp == datetime(2024, 5, 1, 12, tzinfo=UTC)
    assert peak.get_tag('natural') == 'peak'
    assert pool.nodes[2].lon == 20.0

    assert pool.ways[10].node_ids == (1, 2)
    assert pool.relations[100].members == (
        Member('way', ElementId(10), 'outer'),
        Member('node', ElementId(1), ''),
    )


def test_decode_overpass_empty():
    assert len(Format.decode_overpass(b'{"elements": []}')) == 0


def test_decode_overpass_invalid():
    with pytest.raises(ValidationError):
        Format.decode_overpass({'elements': [{'type': 'node', 'id': 1, 'lat': 100.0, 'lon': 0.0}]})
