from collections.abc import Mapping
from datetime import UTC, datetime


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """
    Parse an OSM timestamp, assuming UTC when no offset is given.

    >>> parse_timestamp('2016-12-31T23:59:59Z')
    datetime.datetime(2016, 12, 31, 23, 59, 59, tzinfo=datetime.timezone.utc)
    """
    if value is None or isinstance(value, datetime):
        return value
    result = datetime.fromisoformat(value)
    return result if result.tzinfo is not None else result.replace(tzinfo=UTC)


def parse_ele(tags: Mapping[str, str | None] | None) -> float | None:
    """
    Read the node elevation from the ele=* tag, ignoring values that are not plain numbers.

    >>> parse_ele({'ele': '1234.5'})
    1234.5
    >>> parse_ele({'ele': '1200 m'})
    """
    if not tags or not (value := tags.get('ele')):
        return None
    try:
        return float(value)
    except ValueError:
        return None
