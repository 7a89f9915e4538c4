from collections.abc import Mapping, Sequence
from typing import Any

from osm_area.format.utils import parse_ele, parse_timestamp
from osm_area.models.element_pool import ElementPool
from osm_area.models.element_type import element_type
from osm_area.models.tags import DuplicateTagPolicy
from osm_area.validators.element import NodeInit, RelationInit, WayInit


class Element06Mixin:
    @staticmethod
    def decode_osm06(
        data: Mapping[str, Any],
        *,
        tags_policy: DuplicateTagPolicy | None = None,
    ) -> ElementPool:
        """
        Decode an OSM API 0.6 document, in its XML-to-dict form, into an element pool.

        A tag without the @v attribute is kept as a tag without value.

        >>> pool = Element06Mixin.decode_osm06({'osm': {'node': [{'@id': '1', '@lat': '0.5', '@lon': '0.5'}]}})
        >>> pool.nodes[1].point
        (0.5, 0.5)
        """
        osm: Mapping[str, Any] = data.get('osm', data)

        nodes: list[NodeInit] = []
        for node in _as_list(osm.get('node')):
            tags = _decode_tags_unsafe(node.get('tag'))
            nodes.append({
                'id': int(node['@id']),
                'lat': float(node['@lat']),
                'lon': float(node['@lon']),
                'ele': parse_ele(dict(tags)) if tags else None,
                'timestamp': parse_timestamp(node.get('@timestamp')),
                'tags': tags,
            })

        ways: list[WayInit] = [
            {
                'id': int(way['@id']),
                'nodes': [int(nd['@ref']) for nd in _as_list(way.get('nd'))],
                'timestamp': parse_timestamp(way.get('@timestamp')),
                'tags': _decode_tags_unsafe(way.get('tag')),
            }
            for way in _as_list(osm.get('way'))
        ]

        relations: list[RelationInit] = [
            {
                'id': int(relation['@id']),
                'members': _decode_members_unsafe(_as_list(relation.get('member'))),
                'timestamp': parse_timestamp(relation.get('@timestamp')),
                'tags': _decode_tags_unsafe(relation.get('tag')),
            }
            for relation in _as_list(osm.get('relation'))
        ]

        return ElementPool.from_raw(nodes, ways, relations, tags_policy=tags_policy)


def _as_list(value: Sequence[dict] | dict | None) -> Sequence[dict]:
    """Normalize an XML-to-dict child, which is a dict when it occurs once."""
    if value is None:
        return ()
    if isinstance(value, Mapping):
        return (value,)
    return value


def _decode_tags_unsafe(tags: Sequence[dict] | dict | None) -> list[tuple[str, str | None]] | None:
    """
    Duplicate keys are kept, the tag store applies the duplicate policy.

    >>> _decode_tags_unsafe([{'@k': 'a', '@v': '1'}, {'@k': 'b'}])
    [('a', '1'), ('b', None)]
    """
    items = _as_list(tags)
    if not items:
        return None
    return [(tag['@k'], tag.get('@v')) for tag in items]


def _decode_members_unsafe(members: Sequence[dict]) -> list[tuple[Any, int, str]]:
    """
    >>> _decode_members_unsafe([{'@type': 'node', '@ref': '1', '@role': 'a'}])
    [('node', 1, 'a')]
    """
    return [
        (
            element_type(member['@type']),
            int(member['@ref']),
            member.get('@role', ''),
        )
        for member in members
    ]
