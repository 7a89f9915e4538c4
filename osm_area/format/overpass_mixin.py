import logging
from collections.abc import Mapping
from typing import Any

import orjson

from osm_area.format.utils import parse_ele, parse_timestamp
from osm_area.models.element_pool import ElementPool
from osm_area.models.tags import DuplicateTagPolicy
from osm_area.validators.element import NodeInit, RelationInit, WayInit


class OverpassMixin:
    @staticmethod
    def decode_overpass(
        data: bytes | str | Mapping[str, Any],
        *,
        tags_policy: DuplicateTagPolicy | None = None,
    ) -> ElementPool:
        """
        Decode an Overpass [out:json] response into an element pool.

        >>> pool = OverpassMixin.decode_overpass({'elements': [{'type': 'node', 'id': 1, 'lat': 0.5, 'lon': 0.5}]})
        >>> pool.nodes[1].point
        (0.5, 0.5)
        """
        if not isinstance(data, Mapping):
            data = orjson.loads(data)

        nodes: list[NodeInit] = []
        ways: list[WayInit] = []
        relations: list[RelationInit] = []

        for element in data.get('elements', ()):
            type = element['type']
            tags: dict[str, str] | None = element.get('tags')
            tag_pairs = list(tags.items()) if tags else None
            timestamp = parse_timestamp(element.get('timestamp'))

            if type == 'node':
                nodes.append({
                    'id': element['id'],
                    'lat': float(element['lat']),
                    'lon': float(element['lon']),
                    'ele': parse_ele(tags),
                    'timestamp': timestamp,
                    'tags': tag_pairs,
                })
            elif type == 'way':
                ways.append({
                    'id': element['id'],
                    'nodes': list(element.get('nodes', ())),
                    'timestamp': timestamp,
                    'tags': tag_pairs,
                })
            elif type == 'relation':
                relations.append({
                    'id': element['id'],
                    'members': [
                        (member['type'], member['ref'], member.get('role', ''))
                        for member in element.get('members', ())
                    ],
                    'timestamp': timestamp,
                    'tags': tag_pairs,
                })
            else:
                logging.debug('Skipping unsupported Overpass element type %r', type)

        return ElementPool.from_raw(nodes, ways, relations, tags_policy=tags_policy)
