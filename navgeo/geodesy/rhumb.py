"""
Rhumb line (loxodrome) calculations.

A rhumb line keeps a constant bearing; it is a straight line on a Mercator
projection and generally longer than the great circle route. Longitudes are
scaled by the Mercator 'stretch factor' q = Δφ/Δψ, where Δψ is the difference
in projected latitude.
"""

import math
import logging
from typing import Any, Optional

from ..models.geopoint import GeoPoint
from ..units import DEFAULT_RADIUS
from ..utils.angle_wrap import wrap360
from .base import as_point, as_number, check_radius

logger = logging.getLogger(__name__)

# Below this projected latitude difference the course is treated as east-west.
# q = Δφ/Δψ becomes 0/0 there and machine epsilon is too small a threshold.
ILL_CONDITIONED_TOLERANCE = 10e-12


def _projected_latitude(lat: float) -> float:
    """Mercator projected latitude ψ = ln(tan(π/4 + φ/2)); -inf at the south pole."""
    t = math.tan(math.pi / 4 + lat / 2)
    if t <= 0:
        return -math.inf
    return math.log(t)


def _projected_delta(lat1: float, lat2: float) -> float:
    return _projected_latitude(lat2) - _projected_latitude(lat1)


def _stretch_factor(dlat: float, dpsi: float, lat1: float) -> float:
    if abs(dpsi) > ILL_CONDITIONED_TOLERANCE:
        return dlat / dpsi
    logger.debug("East-west rhumb course, using cos(φ1) as stretch factor")
    return math.cos(lat1)


def _shorter_delta_lon(dlon: float) -> float:
    """Take the shorter rhumb line across the anti-meridian when Δλ exceeds 180°."""
    if abs(dlon) > math.pi:
        return -(2 * math.pi - dlon) if dlon > 0 else 2 * math.pi + dlon
    return dlon


def rhumb_distance(p1: Any, p2: Any, radius: float = DEFAULT_RADIUS) -> float:
    """
    Distance travelling from p1 to p2 along a rhumb line.

    Returns:
        Distance in the same units as radius

    Example:
        >>> rhumb_distance((51.127, 1.338), (50.964, 1.853))
        40307.7...
    """
    p1, p2 = as_point(p1), as_point(p2)
    radius = check_radius(radius)

    lat1 = math.radians(p1.latitude)
    lat2 = math.radians(p2.latitude)
    dlat = lat2 - lat1
    dlon = _shorter_delta_lon(math.radians(abs(p2.longitude - p1.longitude)))

    dpsi = _projected_delta(lat1, lat2)
    q = _stretch_factor(dlat, dpsi, lat1)

    # pythagoras on the 'stretched' Mercator projection
    delta = math.sqrt(dlat * dlat + q * q * dlon * dlon)

    return delta * radius


def rhumb_bearing(p1: Any, p2: Any) -> Optional[float]:
    """
    Constant bearing of the rhumb line from p1 to p2.

    Returns:
        Bearing in degrees from north (0-360), or None for coincident points
    """
    p1, p2 = as_point(p1), as_point(p2)
    if p1.equals(p2):
        logger.debug(f"Rhumb bearing undefined between coincident points {p1!r}")
        return None

    lat1 = math.radians(p1.latitude)
    lat2 = math.radians(p2.latitude)
    dlon = _shorter_delta_lon(math.radians(p2.longitude - p1.longitude))

    dpsi = _projected_delta(lat1, lat2)
    theta = math.atan2(dlon, dpsi)

    return wrap360(math.degrees(theta))


def rhumb_destination_point(start: Any, distance: float, bearing: float,
                            radius: float = DEFAULT_RADIUS) -> GeoPoint:
    """
    Point reached travelling along a rhumb line from start for distance on bearing.

    A course taking the latitude past a pole is reflected back from it.

    Example:
        >>> rhumb_destination_point((51.127, 1.338), 40300, 116.7)
        GeoPoint(name=None, latitude=50.9642..., longitude=1.8530...)
    """
    start = as_point(start)
    distance = as_number(distance, 'distance')
    bearing = as_number(bearing, 'bearing')
    radius = check_radius(radius)

    lat1 = math.radians(start.latitude)
    lon1 = math.radians(start.longitude)
    theta = math.radians(bearing)

    delta = distance / radius  # angular distance in radians

    dlat = delta * math.cos(theta)
    lat2 = lat1 + dlat

    # gone past the pole: normalise latitude
    if abs(lat2) > math.pi / 2:
        lat2 = math.pi - lat2 if lat2 > 0 else -math.pi - lat2

    dpsi = _projected_delta(lat1, lat2)
    q = _stretch_factor(dlat, dpsi, lat1)

    # at a pole q is 0 and the longitude is arbitrary
    dlon = delta * math.sin(theta) / q if q != 0 else 0.0
    lon2 = lon1 + dlon

    return GeoPoint(math.degrees(lat2), math.degrees(lon2))


def rhumb_midpoint(p1: Any, p2: Any) -> GeoPoint:
    """
    Loxodromic midpoint between p1 and p2.

    Falls back to the mean longitude when both points are on the same
    parallel of latitude.
    """
    p1, p2 = as_point(p1), as_point(p2)

    lat1 = math.radians(p1.latitude)
    lon1 = math.radians(p1.longitude)
    lat2 = math.radians(p2.latitude)
    lon2 = math.radians(p2.longitude)

    # crossing anti-meridian: move the smaller longitude up a full turn
    if abs(lon2 - lon1) > math.pi:
        if lon1 < lon2:
            lon1 += 2 * math.pi
        else:
            lon2 += 2 * math.pi

    lat3 = (lat1 + lat2) / 2
    f1 = math.tan(math.pi / 4 + lat1 / 2)
    f2 = math.tan(math.pi / 4 + lat2 / 2)
    f3 = math.tan(math.pi / 4 + lat3 / 2)

    try:
        lon3 = ((lon2 - lon1) * math.log(f3) + lon1 * math.log(f2) - lon2 * math.log(f1)) / math.log(f2 / f1)
    except (ValueError, ZeroDivisionError):
        lon3 = math.nan

    if not math.isfinite(lon3):
        lon3 = (lon1 + lon2) / 2  # parallel of latitude

    return GeoPoint(math.degrees(lat3), math.degrees(lon3))
