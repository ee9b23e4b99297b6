#!/usr/bin/env python3

import sys
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Optional, Tuple

from ..config import DmsConfig
from ..exceptions import InvalidAngleError, InvalidFormatError
from ..units import DEFAULT_RADIUS
from ..utils.angle_wrap import wrap90, wrap180
from ..utils import dms

POINT_FORMATS = ('d', 'dm', 'dms', 'n')


def _coerce_degrees(value: Any, field: str) -> float:
    """Numeric degrees from a number or numeric/deg-min-sec text."""
    if isinstance(value, bool) or value is None:
        raise InvalidAngleError(field, value)
    if isinstance(value, Real):
        degrees = float(value)
    elif isinstance(value, str):
        degrees = dms.parse(value)
    else:
        raise InvalidAngleError(field, value)
    if not math.isfinite(degrees):
        raise InvalidAngleError(field, value)
    return degrees


@dataclass(eq=False)
class GeoPoint:
    """
    A latitude/longitude point on a spherical earth, with an optional name.

    Coordinates are stored in decimal degrees and always normalized:
    - Latitude: -90 to +90 degrees (negative for South, positive for North)
    - Longitude: -180 to +180 degrees (negative for West, positive for East)

    Values may be given as numbers or as deg/min/sec text; out of range values
    are wrapped (91 => 89, 181 => -179) rather than rejected. Non-numeric
    values raise InvalidAngleError, at construction and on assignment.

    Geodesy methods never modify the point; they return new GeoPoints.
    Distances use the units of the radius (default: metres).
    """

    latitude: float
    longitude: float
    name: Optional[str] = None

    def __setattr__(self, attr: str, value: Any) -> None:
        if attr == 'latitude':
            value = wrap90(_coerce_degrees(value, attr))
        elif attr == 'longitude':
            value = wrap180(_coerce_degrees(value, attr))
        super().__setattr__(attr, value)

    # Aliases

    @property
    def lat(self) -> float:
        return self.latitude

    @lat.setter
    def lat(self, value: Any) -> None:
        self.latitude = value

    @property
    def lon(self) -> float:
        return self.longitude

    @lon.setter
    def lon(self, value: Any) -> None:
        self.longitude = value

    @property
    def lng(self) -> float:
        return self.longitude

    @lng.setter
    def lng(self, value: Any) -> None:
        self.longitude = value

    @classmethod
    def parse(cls, *args: Any) -> 'GeoPoint':
        """
        Parse a point from a variety of literal forms.

        Example:
            >>> GeoPoint.parse(52.205, 0.119)
            >>> GeoPoint.parse('52.205, 0.119')
            >>> GeoPoint.parse('52°12′18.0″N', '000°07′08.4″E')
            >>> GeoPoint.parse({'lat': 52.205, 'lng': 0.119})
            >>> GeoPoint.parse({'type': 'Point', 'coordinates': [0.119, 52.205]})

        Raises:
            InvalidAngleError: For empty, None or unparsable input
        """
        from .point_literal import to_point
        return to_point(*args)

    def copy(self) -> 'GeoPoint':
        return GeoPoint(self.latitude, self.longitude, self.name)

    def equals(self, other: Any) -> bool:
        """True if both latitude and longitude differ by no more than machine epsilon."""
        if not isinstance(other, GeoPoint):
            other = GeoPoint.parse(other)
        if abs(self.latitude - other.latitude) > sys.float_info.epsilon:
            return False
        if abs(self.longitude - other.longitude) > sys.float_info.epsilon:
            return False
        return True

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GeoPoint):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    # Great circle

    def distance_to(self, other: Any, radius: float = DEFAULT_RADIUS) -> float:
        from ..geodesy import great_circle
        return great_circle.distance(self, other, radius)

    def initial_bearing_to(self, other: Any) -> Optional[float]:
        from ..geodesy import great_circle
        return great_circle.initial_bearing(self, other)

    def final_bearing_to(self, other: Any) -> Optional[float]:
        from ..geodesy import great_circle
        return great_circle.final_bearing(self, other)

    def midpoint_to(self, other: Any) -> 'GeoPoint':
        from ..geodesy import great_circle
        return great_circle.midpoint(self, other)

    def intermediate_point_to(self, other: Any, fraction: float) -> 'GeoPoint':
        from ..geodesy import great_circle
        return great_circle.intermediate_point(self, other, fraction)

    def destination_point(self, distance: float, bearing: float, radius: float = DEFAULT_RADIUS) -> 'GeoPoint':
        from ..geodesy import great_circle
        return great_circle.destination_point(self, distance, bearing, radius)

    def point_from_bearing_distance(self, bearing: float, distance: float, name: Optional[str] = None,
                                    radius: float = DEFAULT_RADIUS) -> 'GeoPoint':
        """
        Create a new named GeoPoint from this point's position, bearing, and distance.

        Args:
            bearing: Bearing in degrees (0-360, where 0/360 is North, 90 is East, etc.)
            distance: Distance in the units of radius
            name: Optional name for the new point
            radius: Earth radius (default: metres)
        """
        point = self.destination_point(distance, bearing, radius)
        point.name = name
        return point

    def cross_track_distance_to(self, path_start: Any, path_end: Any, radius: float = DEFAULT_RADIUS) -> float:
        from ..geodesy import great_circle
        return great_circle.cross_track_distance(self, path_start, path_end, radius)

    def along_track_distance_to(self, path_start: Any, path_end: Any, radius: float = DEFAULT_RADIUS) -> float:
        from ..geodesy import great_circle
        return great_circle.along_track_distance(self, path_start, path_end, radius)

    def distance_to_segment(self, line_start: Any, line_end: Any, radius: float = DEFAULT_RADIUS) -> float:
        from ..geodesy import great_circle
        return great_circle.distance_to_segment(self, line_start, line_end, radius)

    def max_latitude(self, bearing: float) -> float:
        from ..geodesy import great_circle
        return great_circle.max_latitude(self, bearing)

    # Rhumb line

    def rhumb_distance_to(self, other: Any, radius: float = DEFAULT_RADIUS) -> float:
        from ..geodesy import rhumb
        return rhumb.rhumb_distance(self, other, radius)

    def rhumb_bearing_to(self, other: Any) -> Optional[float]:
        from ..geodesy import rhumb
        return rhumb.rhumb_bearing(self, other)

    def rhumb_destination_point(self, distance: float, bearing: float, radius: float = DEFAULT_RADIUS) -> 'GeoPoint':
        from ..geodesy import rhumb
        return rhumb.rhumb_destination_point(self, distance, bearing, radius)

    def rhumb_midpoint_to(self, other: Any) -> 'GeoPoint':
        from ..geodesy import rhumb
        return rhumb.rhumb_midpoint(self, other)

    # Representations

    def to_geojson(self) -> Dict[str, Any]:
        """This point as a GeoJSON 'Point' object (coordinates are [lon, lat])."""
        return {'type': 'Point', 'coordinates': [self.longitude, self.latitude]}

    def to_dms(self, dp: int = 0, config: Optional[DmsConfig] = None) -> Tuple[str, str]:
        """
        Convert coordinates to Degrees, Minutes, Seconds format.

        Returns:
            Tuple of (latitude string, longitude string)
            Example: ("48° 51′ 24″ N", "002° 21′ 08″ E") with a space separator
        """
        return dms.to_lat(self.latitude, 'dms', dp, config), dms.to_lon(self.longitude, 'dms', dp, config)

    def to_dm(self, dp: int = 2, config: Optional[DmsConfig] = None) -> Tuple[str, str]:
        """Convert coordinates to Degrees, Decimal Minutes format."""
        return dms.to_lat(self.latitude, 'dm', dp, config), dms.to_lon(self.longitude, 'dm', dp, config)

    def to_string(self, fmt: str = 'd', dp: Optional[int] = None, config: Optional[DmsConfig] = None) -> str:
        """
        Format as 'lat, lon' in degrees, degrees+minutes or degrees+minutes+seconds.

        Args:
            fmt: 'd', 'dm', 'dms', or 'n' for signed numeric 'lat,lon'
            dp: Decimal places; default 4 for d and n, 2 for dm, 0 for dms

        Raises:
            InvalidFormatError: For any other format

        Example:
            >>> GeoPoint(51.47788, -0.00147).to_string('n')
            '51.4779,-0.0015'
        """
        if fmt not in POINT_FORMATS:
            raise InvalidFormatError('format', fmt)

        if fmt == 'n':
            if dp is None:
                dp = 4
            return f"{dms.to_fixed(self.latitude, dp)},{dms.to_fixed(self.longitude, dp)}"

        lat = dms.to_lat(self.latitude, fmt, dp, config)
        lon = dms.to_lon(self.longitude, fmt, dp, config)
        return f"{lat}, {lon}"

    def __str__(self) -> str:
        name_str = f"{self.name} " if self.name else ""
        return f"{name_str}{self.to_string()}"

    def __repr__(self) -> str:
        return f"GeoPoint(name={self.name!r}, latitude={self.latitude}, longitude={self.longitude})"
