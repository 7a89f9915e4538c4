import pytest

from osm_area.exceptions.extract_error import DuplicateKeyError
from osm_area.format import Format
from osm_area.models.element import Member
from osm_area.models.element_type import ElementId
from osm_area.models.tags import NO_VALUE


def test_decode_osm06():
    data = {
        'osm': {
            '@version': '0.6',
            'node': [
                {
                    '@id': '1',
                    '@lat': '0.5',
                    '@lon': '0.5',
                    '@timestamp': '2024-01-01T00:00:00Z',
                    'tag': [{'@k': 'ele', '@v': '350'}, {'@k': 'survey_point'}],
                },
                {'@id': '2', '@lat': '5', '@lon': '5'},
            ],
            'way': {
                '@id': '1',
                'nd': [{'@ref': '1'}, {'@ref': '2'}],
                'tag': {'@k': 'highway', '@v': 'residential'},
            },
            'relation': [
                {
                    '@id': '1',
                    'member': {'@type': 'way', '@ref': '1', '@role': 'outer'},
                },
            ],
        }
    }
    pool = Format.decode_osm06(data)

    node = pool.nodes[1]
    assert node.ele == 350
    assert node.get_tag('survey_point') is NO_VALUE
    assert node.timestamp is not None
    assert pool.nodes[2].tags == {}

    assert pool.ways[1].node_ids == (1, 2)
    assert pool.ways[1].get_tag('highway') == 'residential'
    assert pool.relations[1].members == (Member('way', ElementId(1), 'outer'),)


def test_decode_osm06_without_root():
    pool = Format.decode_osm06({'node': {'@id': '-1', '@lat': '0', '@lon': '0'}})
    assert list(pool.nodes) == [-1]


def test_decode_osm06_duplicate_tag():
    data = {'way': {'@id': '1', 'nd': {'@ref': '1'}, 'tag': [{'@k': 'a', '@v': '1'}, {'@k': 'a', '@v': '2'}]}}
    with pytest.raises(DuplicateKeyError):
        Format.decode_osm06(data)
    assert Format.decode_osm06(data, tags_policy='last_write_wins').ways[1].get_tag('a') == '2'
