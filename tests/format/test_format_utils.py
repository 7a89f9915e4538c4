from datetime import UTC, datetime, timedelta, timezone

import pytest

from osm_area.format.utils import parse_ele, parse_timestamp


@pytest.mark.parametrize(
    ('value', 'expected'),
    [
        (None, None),
        ('2016-12-31T23:59:59Z', datetime(2016, 12, 31, 23, 59, 59, tzinfo=UTC)),
        ('2016-12-31T23:59:59', datetime(2016, 12, 31, 23, 59, 59, tzinfo=UTC)),
        ('2017-01-01T01:59:59+02:00', datetime(2017, 1, 1, 1, 59, 59, tzinfo=timezone(timedelta(hours=2)))),
        (datetime(2020, 1, 1, tzinfo=UTC), datetime(2020, 1, 1, tzinfo=UTC)),
    ],
)
def test_parse_timestamp(value, expected):
    assert parse_timestamp(value) == expected


@pytest.mark.parametrize(
    ('tags', 'expected'),
    [
        (None, None),
        ({}, None),
        ({'ele': '1234.5'}, 1234.5),
        ({'ele': '-10'}, -10.0),
        ({'ele': '1200 m'}, None),
        ({'ele': None}, None),
        ({'ele': ''}, None),
    ],
)
def test_parse_ele(tags, expected):
    assert parse_ele(tags) == expected
