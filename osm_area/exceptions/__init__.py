from osm_area.exceptions.element_mixin import ElementExceptionsMixin
from osm_area.exceptions.map_mixin import MapExceptionsMixin
from osm_area.exceptions.tags_mixin import TagsExceptionsMixin


class Exceptions(
    ElementExceptionsMixin,
    MapExceptionsMixin,
    TagsExceptionsMixin,
): ...
