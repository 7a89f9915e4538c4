"""
Well-known tag keys and values used for routing-oriented classification.

All tables are open sets: values outside them are valid data, the
predicates simply return False for them.

https://wiki.openstreetmap.org/wiki/Map_features
"""

from typing import Literal, get_args

from osm_area.models.tags import NO_VALUE, Tagged

# -------------------- Keys --------------------

ACCESS_KEY = 'access'
NAME_KEY = 'name'
TYPE_KEY = 'type'
ROAD_TYPE_KEY = 'highway'
RAIL_TYPE_KEY = 'railway'
JUNCTION_KEY = 'junction'
ONE_WAY_KEY = 'oneway'
INCLINE_KEY = 'incline'
RESTRICTION_KEY = 'restriction'
RESTRICTION_EXCEPTION_KEY = 'except'
"""Restriction exceptions, the value is a travel mode."""

# -------------------- Way types --------------------

# https://wiki.openstreetmap.org/wiki/Key:highway
RoadType = Literal[
    'bridleway',  # horse riders, equivalent to highway=path + horse=designated
    'cycleway',
    'footway',
    'sidewalk',  # footway=sidewalk
    'pedestrian',
    'motorway',
    'path',
    'primary',
    'residential',
    'secondary',
    'service',
    'steps',
    'tertiary',
    'track',  # agricultural or forestry use
    'trunk',
    'unclassified',  # minor through road, not an unknown classification
]

# https://wiki.openstreetmap.org/wiki/Key:railway
RailType = Literal[
    'light_rail',
    'narrow_gauge',
    'rail',
    'subway',
    'tram',
]

WayType = RoadType | RailType

ROAD_TYPES = frozenset[str](get_args(RoadType))
RAIL_TYPES = frozenset[str](get_args(RailType))
WAY_TYPES = ROAD_TYPES | RAIL_TYPES

# -------------------- Access --------------------

# https://wiki.openstreetmap.org/wiki/Key:access
AccessLevel = Literal[
    'agricultural',
    'yes',  # legally-enshrined right of access
    'customers',
    'delivery',
    'discouraged',  # legal but discouraged
    'destination',
    'forestry',
    'no',
    'permissive',  # owner granted access
    'private',
]

ACCESS_LEVELS = frozenset[str](get_args(AccessLevel))

# -------------------- Travel modes --------------------

TravelMode = Literal[
    'bicycle',
    'bus',
    'car',
    'foot',
    'horse',
    'motorcar',
    'motorcycle',
    'motor_vehicle',
    'psv',  # public service vehicle
    'tram',
    'train',
    'vehicle',
]

TRAVEL_MODES = frozenset[str](get_args(TravelMode))

# -------------------- Relations --------------------

# https://wiki.openstreetmap.org/wiki/Types_of_relation
RelationType = Literal[
    'boundary',
    'enforcement',
    'multipolygon',
    'restriction',
    'route',
    'route_master',
    'should-be-excluded',  # relations flagged to be left out by consumers
    'waterway',
]

RELATION_TYPES = frozenset[str](get_args(RelationType))

# https://wiki.openstreetmap.org/wiki/Relation:restriction
Restriction = Literal[
    'no_right_turn',
    'no_left_turn',
    'no_u_turn',
    'no_straight_on',
    'no_entry',
    'no_exit',
    'only_right_turn',
    'only_left_turn',
    'only_straight_on',
]

RESTRICTIONS = frozenset[str](get_args(Restriction))

# https://wiki.openstreetmap.org/wiki/Relation#Roles
Role = Literal[
    'from',
    'via',
    'to',
    'inner',
    'outer',
    'subarea',
    'forward',
    'backward',
    'platform',
    'label',
    'admin_centre',
]

ROLES = frozenset[str](get_args(Role))

Incline = Literal['up', 'down']

INCLINES = frozenset[str](get_args(Incline))


def is_known_way_type(value: str) -> bool:
    return value in WAY_TYPES


def is_known_access(value: str) -> bool:
    return value in ACCESS_LEVELS


def is_known_travel_mode(value: str) -> bool:
    return value in TRAVEL_MODES


def is_known_relation_type(value: str) -> bool:
    return value in RELATION_TYPES


def is_known_restriction(value: str) -> bool:
    return value in RESTRICTIONS


def is_known_role(value: str) -> bool:
    return value in ROLES


def way_type(element: Tagged) -> str | None:
    """
    Get the highway or railway value of the element.

    Unknown values are returned as-is.
    """
    for key in (ROAD_TYPE_KEY, RAIL_TYPE_KEY):
        value = element.get_tag(key)
        if value is not None and value is not NO_VALUE:
            return value
    return None


def access_level(element: Tagged) -> str | None:
    value = element.get_tag(ACCESS_KEY)
    return None if value is NO_VALUE else value


def is_restriction(element: Tagged) -> bool:
    """Check whether the element is a turn restriction relation."""
    return element.get_tag(TYPE_KEY) == 'restriction'


def restriction_kind(value: str) -> Literal['no', 'only'] | None:
    """
    Classify a restriction value by its prefix.

    'no_' forbids routing from the 'from' to the 'to' member,
    'only_' makes it the only permitted route.

    >>> restriction_kind('no_left_turn')
    'no'
    >>> restriction_kind('only_straight_on')
    'only'
    """
    if value.startswith('no_'):
        return 'no'
    if value.startswith('only_'):
        return 'only'
    return None
