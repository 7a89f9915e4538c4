from logging.config import dictConfig
from typing import Literal

from pydantic import ConfigDict

from osm_area.lib.pydantic_settings_integration import pydantic_settings_integration

# -------------------- System Configuration --------------------

# Core settings
ENV: Literal['dev', 'test', 'prod'] = 'prod'
LOG_LEVEL: Literal['DEBUG', 'INFO', 'WARNING'] | None = None

# -------------------- Element Model --------------------

# Elements
ELEMENT_WAY_MEMBERS_LIMIT = 2_000
ELEMENT_RELATION_MEMBERS_LIMIT = 32_000

# Tags
TAGS_LIMIT = 600
TAGS_KEY_MAX_LENGTH = 255
TAGS_VALUE_MAX_LENGTH = 255

# Ingestion policies
DANGLING_REFERENCE_POLICY: Literal['strict', 'lenient'] = 'strict'
DUPLICATE_TAG_POLICY: Literal['reject', 'last_write_wins'] = 'reject'

# -------------------- Area Extract --------------------

GEO_COORDINATE_PRECISION = 7
MAP_QUERY_AREA_MAX_SIZE: float | None = None  # in square degrees
MAP_QUERY_NODES_LIMIT: int | None = None

pydantic_settings_integration(__name__, globals(), env_prefix='OSM_AREA_')

# -------------------- Constant or derived configuration --------------------

NAME = 'osm-area'

PYDANTIC_CONFIG = ConfigDict(
    extra='forbid',
    arbitrary_types_allowed=True,
    allow_inf_nan=False,
    strict=True,
    cache_strings='keys',
)

if LOG_LEVEL is None:
    LOG_LEVEL = 'INFO' if ENV == 'prod' else 'DEBUG'  # pyright: ignore[reportConstantRedefinition]

# -------------------- Logging configuration --------------------

dictConfig({
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': '%(levelname)-8s | %(asctime)s | %(name)s %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'default': {
            'formatter': 'default',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',
        },
    },
    'loggers': {
        'root': {'handlers': ['default'], 'level': LOG_LEVEL},
    },
})
