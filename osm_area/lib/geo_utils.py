from typing import NamedTuple

import cython
import numpy as np
from shapely import MultiPolygon, Polygon, box

from osm_area.config import GEO_COORDINATE_PRECISION
from osm_area.lib.exceptions_context import raise_for


class BoundingBox(NamedTuple):
    """
    Bounding box in degrees, bounds inclusive.

    After normalization minlon is in [-180, 180) and maxlon may exceed 180,
    in which case the box crosses the antimeridian.
    """

    minlon: float
    minlat: float
    maxlon: float
    maxlat: float

    @property
    def area(self) -> float:
        """Area in square degrees."""
        return (self.maxlon - self.minlon) * (self.maxlat - self.minlat)

    @property
    def parts(self) -> tuple['BoundingBox', ...]:
        """
        Split the box at the antimeridian.

        >>> BoundingBox(170, 0, 190, 1).parts
        (BoundingBox(minlon=170, minlat=0, maxlon=180, maxlat=1), BoundingBox(minlon=-180, minlat=0, maxlon=-170, maxlat=1))
        """
        if self.maxlon <= 180:
            return (self,)
        return (
            BoundingBox(self.minlon, self.minlat, 180, self.maxlat),
            BoundingBox(-180, self.minlat, self.maxlon - 360, self.maxlat),
        )

    def contains(self, lat: float, lon: float) -> bool:
        """
        Check whether the point lies within the box, bounds included.

        >>> BoundingBox(0, 0, 1, 1).contains(1, 0)
        True
        """
        for part in self.parts:
            if part.minlat <= lat <= part.maxlat and part.minlon <= lon <= part.maxlon:
                return True
        return False

    def contains_mask(self, lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
        """Vectorized variant of contains, returns a boolean mask."""
        mask = np.zeros(lats.shape, dtype=np.bool_)
        for part in self.parts:
            mask |= (
                (lats >= part.minlat)
                & (lats <= part.maxlat)
                & (lons >= part.minlon)
                & (lons <= part.maxlon)
            )
        return mask

    def expand(self, delta: float) -> 'BoundingBox':
        """
        Grow the box by delta degrees on each side, then normalize it.

        >>> BoundingBox(-179, 0, -178, 1).expand(2)
        BoundingBox(minlon=179, minlat=-2, maxlon=184, maxlat=3)
        """
        return normalize_bbox(
            self.minlon - delta,
            self.minlat - delta,
            self.maxlon + delta,
            self.maxlat + delta,
        )

    def to_geometry(self) -> Polygon | MultiPolygon:
        """
        Convert to a shapely geometry.

        Returns a MultiPolygon if the box crosses the antimeridian.
        """
        parts = self.parts
        if len(parts) == 1:
            return box(*parts[0])
        return MultiPolygon([box(*part) for part in parts])

    def __str__(self) -> str:
        return f'{self.minlon},{self.minlat},{self.maxlon},{self.maxlat}'


def parse_bbox(s: str) -> BoundingBox:
    """
    Parse a bbox string in the 'minlon,minlat,maxlon,maxlat' form.

    Raises exception if the string is not in a valid format.

    >>> parse_bbox('1,2,3,4')
    BoundingBox(minlon=1.0, minlat=2.0, maxlon=3.0, maxlat=4.0)
    """
    parts: list[str] = s.strip().split(',', 3)
    try:
        precision = GEO_COORDINATE_PRECISION
        minx: cython.double = round(float(parts[0].strip()), precision)
        miny: cython.double = round(float(parts[1].strip()), precision)
        maxx: cython.double = round(float(parts[2].strip()), precision)
        maxy: cython.double = round(float(parts[3].strip()), precision)
    except (IndexError, ValueError):
        raise_for.bad_bbox(s)
    return normalize_bbox(minx, miny, maxx, maxy, source=s)


def normalize_bbox(
    minx: float,
    miny: float,
    maxx: float,
    maxy: float,
    *,
    source: str | None = None,
) -> BoundingBox:
    """
    Validate and normalize raw bounds into a BoundingBox.

    >>> normalize_bbox(-190, 0, -170, 1)
    BoundingBox(minlon=170, minlat=0, maxlon=190, maxlat=1)
    """
    if source is None:
        source = f'{minx},{miny},{maxx},{maxy}'
    if not all(np.isfinite((minx, miny, maxx, maxy))):
        raise_for.bad_bbox(source, 'coordinates must be finite')
    if minx > maxx:
        raise_for.bad_bbox(source, 'min longitude > max longitude')
    if miny > maxy:
        raise_for.bad_bbox(source, 'min latitude > max latitude')

    # normalize latitude
    miny = max(miny, -90)
    maxy = min(maxy, 90)

    # special case, bbox wraps around the whole world
    if maxx - minx >= 360:
        return BoundingBox(-180, miny, 180, maxy)

    # normalize minx to [-180, 180), maxx to [minx, minx + 360)
    if minx < -180 or maxx > 180:
        offset: cython.double = ((minx + 180) % 360 - 180) - minx
        minx += offset
        maxx += offset

    return BoundingBox(minx, miny, maxx, maxy)
