"""
Area of spherical polygons whose sides are great circle arcs.
"""

import math
import logging
from typing import Any, List, Sequence

from ..models.geopoint import GeoPoint
from ..units import DEFAULT_RADIUS
from .base import as_point, check_radius
from .great_circle import initial_bearing, final_bearing

logger = logging.getLogger(__name__)

# Turn sum below this (degrees) means the path goes round a pole
POLE_ENCLOSURE_THRESHOLD = 90


def _vertices(polygon: Sequence[Any]) -> List[GeoPoint]:
    """Distinct consecutive vertices, without a repeated closing vertex."""
    vertices: List[GeoPoint] = []
    for candidate in polygon:
        point = as_point(candidate)
        if vertices and point.equals(vertices[-1]):
            continue
        vertices.append(point)
    if len(vertices) > 1 and vertices[0].equals(vertices[-1]):
        vertices.pop()
    return vertices


def _turn(to_bearing: float, from_bearing: float) -> float:
    """Signed change of course in -180..180."""
    return (to_bearing - from_bearing + 540) % 360 - 180


def _is_pole_enclosed(closed: List[GeoPoint]) -> bool:
    # sum of course changes round a pole is 0° rather than the usual ±360°
    total = 0.0
    prev_bearing = initial_bearing(closed[0], closed[1])
    for v in range(len(closed) - 1):
        init_bearing = initial_bearing(closed[v], closed[v + 1])
        end_bearing = final_bearing(closed[v], closed[v + 1])
        total += _turn(init_bearing, prev_bearing)
        total += _turn(end_bearing, init_bearing)
        prev_bearing = end_bearing
    total += _turn(initial_bearing(closed[0], closed[1]), prev_bearing)
    return abs(total) < POLE_ENCLOSURE_THRESHOLD


def is_pole_enclosed(polygon: Sequence[Any]) -> bool:
    """
    Whether a polygon goes round a pole.

    Note:
        Unreliable when an edge passes through (or very near) a pole, e.g.
        (85, 90), (85, 0), (85, -90): the bearing flips by 180° at the pole
        and the turn sum depends on rounding.
    """
    vertices = _vertices(polygon)
    if len(vertices) < 3:
        return False
    return _is_pole_enclosed(vertices + [vertices[0]])


def area_of(polygon: Sequence[Any], radius: float = DEFAULT_RADIUS) -> float:
    """
    Area of a spherical polygon.

    For each edge, the spherical excess E of the trapezium obtained by
    extending the edge to the equator is
        tan(E/2) = tan(Δλ/2)⋅(tan(φ1/2) + tan(φ2/2)) / (1 + tan(φ1/2)⋅tan(φ2/2))
    and the polygon's excess is their sum. Polygons enclosing a pole are
    corrected to |S| − 2π.

    Args:
        polygon: Vertices as point-likes; closed or not (a repeated first
            vertex is not counted twice). The sequence is not modified.
        radius: Earth radius (defaults to mean radius in metres)

    Returns:
        Area in units of radius squared; 0 for fewer than 3 distinct vertices

    Example:
        >>> area_of([(0, 0), (1, 0), (0, 1)])
        6182469722.7...
    """
    radius = check_radius(radius)
    vertices = _vertices(polygon)
    if len(vertices) < 3:
        logger.debug(f"Polygon with {len(vertices)} distinct vertices has no area")
        return 0.0

    closed = vertices + [vertices[0]]

    excess = 0.0  # steradians
    for v in range(len(vertices)):
        lat1 = math.radians(closed[v].latitude)
        lat2 = math.radians(closed[v + 1].latitude)
        dlon = math.radians(closed[v + 1].longitude - closed[v].longitude)
        e = 2 * math.atan2(
            math.tan(dlon / 2) * (math.tan(lat1 / 2) + math.tan(lat2 / 2)),
            1 + math.tan(lat1 / 2) * math.tan(lat2 / 2)
        )
        excess += e

    if _is_pole_enclosed(closed):
        logger.debug("Polygon encloses a pole")
        excess = abs(excess) - 2 * math.pi

    return abs(excess * radius * radius)
