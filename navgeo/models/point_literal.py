"""
Literal forms accepted wherever a point is expected.

A point can be given as a pair of latitude/longitude values, a single
"lat, lon" string, a mapping with lat/lon keys, or a GeoJSON Point. Each form
is a small dataclass; `classify` picks exactly one and `resolve` builds the
GeoPoint.
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from ..exceptions import InvalidAngleError
from ..utils.angle_wrap import wrap90, wrap180
from ..utils.dms import parse
from .geopoint import GeoPoint

# Later keys win, so 'lat' overrides 'latitude' and 'lon' overrides 'lng'/'longitude'
LATITUDE_KEYS = ('latitude', 'lat')
LONGITUDE_KEYS = ('longitude', 'lng', 'lon')


def _build(lat: Any, lon: Any, source: Any) -> GeoPoint:
    lat = wrap90(parse(lat))
    lon = wrap180(parse(lon))
    if math.isnan(lat) or math.isnan(lon) or math.isinf(lat) or math.isinf(lon):
        raise InvalidAngleError('point', source)
    return GeoPoint(lat, lon)


@dataclass(frozen=True)
class ExistingPoint:
    point: GeoPoint

    def resolve(self) -> GeoPoint:
        return self.point


@dataclass(frozen=True)
class PointPair:
    """Separate latitude and longitude, numeric or deg/min/sec."""

    lat: Any
    lon: Any

    def resolve(self) -> GeoPoint:
        return _build(self.lat, self.lon, f"{self.lat},{self.lon}")


@dataclass(frozen=True)
class PointString:
    """Single comma separated 'lat, lon' string."""

    text: str

    def resolve(self) -> GeoPoint:
        parts = self.text.split(',')
        if len(parts) != 2:
            raise InvalidAngleError('point', self.text)
        return _build(parts[0], parts[1], self.text)


@dataclass(frozen=True)
class PointMapping:
    """Mapping with lat/latitude and lon/lng/longitude keys."""

    mapping: Mapping

    def resolve(self) -> GeoPoint:
        lat = lon = None
        for key in LATITUDE_KEYS:
            if self.mapping.get(key) is not None:
                lat = self.mapping[key]
        for key in LONGITUDE_KEYS:
            if self.mapping.get(key) is not None:
                lon = self.mapping[key]
        return _build(lat, lon, dict(self.mapping))


@dataclass(frozen=True)
class GeoJsonPoint:
    """GeoJSON Point; coordinates are [lon, lat]."""

    coordinates: Sequence

    def resolve(self) -> GeoPoint:
        if len(self.coordinates) < 2:
            raise InvalidAngleError('point', {'type': 'Point', 'coordinates': list(self.coordinates)})
        lon, lat = self.coordinates[0], self.coordinates[1]
        return _build(lat, lon, {'type': 'Point', 'coordinates': list(self.coordinates)})


PointLiteral = Union[ExistingPoint, PointPair, PointString, PointMapping, GeoJsonPoint]


def classify(*args: Any) -> PointLiteral:
    """
    Identify which literal form the arguments are.

    Raises:
        InvalidAngleError: For empty, None or unrecognized input
    """
    if len(args) == 0:
        raise InvalidAngleError('point', args, "invalid (empty) point")
    if any(arg is None for arg in args[:2]):
        raise InvalidAngleError('point', args, "invalid (null) point")

    if len(args) == 2:
        return PointPair(args[0], args[1])
    if len(args) > 2:
        raise InvalidAngleError('point', args)

    value = args[0]
    if isinstance(value, GeoPoint):
        return ExistingPoint(value)
    if isinstance(value, str):
        return PointString(value)
    if isinstance(value, Mapping):
        coordinates = value.get('coordinates')
        if value.get('type') == 'Point' and isinstance(coordinates, Sequence) and not isinstance(coordinates, str):
            return GeoJsonPoint(coordinates)
        return PointMapping(value)
    if isinstance(value, Sequence) and len(value) == 2:
        return PointPair(value[0], value[1])
    if hasattr(value, 'latitude') and hasattr(value, 'longitude'):
        return PointPair(value.latitude, value.longitude)

    raise InvalidAngleError('point', value)


def to_point(*args: Any) -> GeoPoint:
    """Build a GeoPoint from any literal form; existing GeoPoints are returned as is."""
    return classify(*args).resolve()
