from osm_area.format.element06_mixin import Element06Mixin
from osm_area.format.overpass_mixin import OverpassMixin


class Format(
    Element06Mixin,
    OverpassMixin,
): ...
