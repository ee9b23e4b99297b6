"""
Great circle calculations on a spherical earth.

All functions accept point-like arguments (GeoPoint, (lat, lon) tuples,
'lat, lon' strings, lat/lon mappings, GeoJSON points) and return new
GeoPoints or scalars; inputs are never modified.

Distances are in the units of the radius argument (default: metres);
bearings are in degrees 0-360 from true north.
"""

import sys
import math
import logging
from typing import Any, Optional, Tuple

from ..models.geopoint import GeoPoint
from ..units import DEFAULT_RADIUS, EARTH_RADIUS_NM
from ..utils.angle_wrap import wrap180, wrap360
from .base import as_point, as_number, check_radius
from .outcome import Outcome, Resolution

logger = logging.getLogger(__name__)

# Segments shorter than 0.1nm are treated as a single point
SHORT_SEGMENT_ANGLE = 0.1 / EARTH_RADIUS_NM

# Sines of the triangle angles below this are zero: both paths on one great circle
COLLINEAR_SINE_TOLERANCE = 1e-12


def _clamp(value: float) -> float:
    """Protect inverse trig functions against rounding errors."""
    return min(max(value, -1.0), 1.0)


def _angular_distance(p1: GeoPoint, p2: GeoPoint) -> float:
    """Haversine angular distance in radians."""
    lat1 = math.radians(p1.latitude)
    lon1 = math.radians(p1.longitude)
    lat2 = math.radians(p2.latitude)
    lon2 = math.radians(p2.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance(p1: Any, p2: Any, radius: float = DEFAULT_RADIUS) -> float:
    """
    Distance along the surface of the earth between two points.

    Uses the haversine formula:
        a = sin²(Δφ/2) + cos φ1 ⋅ cos φ2 ⋅ sin²(Δλ/2)
        d = R ⋅ 2 ⋅ atan2(√a, √(1−a))

    Args:
        p1: Start point
        p2: Destination point
        radius: Earth radius (defaults to mean radius in metres)

    Returns:
        Distance in the same units as radius; 0 for coincident points

    Example:
        >>> distance((52.205, 0.119), (48.857, 2.351))
        404279.16...
    """
    p1, p2 = as_point(p1), as_point(p2)
    radius = check_radius(radius)
    return radius * _angular_distance(p1, p2)


def initial_bearing(p1: Any, p2: Any) -> Optional[float]:
    """
    Initial bearing from p1 towards p2 along the great circle.

    Returns:
        Bearing in degrees from north (0-360), or None for coincident points
        where the bearing is undefined
    """
    p1, p2 = as_point(p1), as_point(p2)
    if p1.equals(p2):
        logger.debug(f"Bearing undefined between coincident points {p1!r}")
        return None

    # tanθ = sinΔλ⋅cosφ2 / cosφ1⋅sinφ2 − sinφ1⋅cosφ2⋅cosΔλ
    lat1 = math.radians(p1.latitude)
    lat2 = math.radians(p2.latitude)
    dlon = math.radians(p2.longitude - p1.longitude)

    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    y = math.sin(dlon) * math.cos(lat2)
    bearing = math.degrees(math.atan2(y, x))

    return wrap360(bearing)


def final_bearing(p1: Any, p2: Any) -> Optional[float]:
    """
    Bearing on arrival at p2 having followed the great circle from p1.

    This is the reverse of the initial bearing from p2 back to p1.

    Returns:
        Bearing in degrees from north (0-360), or None for coincident points
    """
    reverse = initial_bearing(p2, p1)
    if reverse is None:
        return None
    return wrap360(reverse + 180)


def midpoint(p1: Any, p2: Any) -> GeoPoint:
    """
    Midpoint of the great circle path between two points.

    The vector to the midpoint is the sum of the unit vectors to both points.
    """
    p1, p2 = as_point(p1), as_point(p2)

    lat1 = math.radians(p1.latitude)
    lon1 = math.radians(p1.longitude)
    lat2 = math.radians(p2.latitude)
    dlon = math.radians(p2.longitude - p1.longitude)

    # place point A on the prime meridian (y = 0)
    ax, ay, az = math.cos(lat1), 0.0, math.sin(lat1)
    bx = math.cos(lat2) * math.cos(dlon)
    by = math.cos(lat2) * math.sin(dlon)
    bz = math.sin(lat2)

    # no need to normalise the sum
    cx, cy, cz = ax + bx, ay + by, az + bz

    lat_m = math.atan2(cz, math.sqrt(cx * cx + cy * cy))
    lon_m = lon1 + math.atan2(cy, cx)

    return GeoPoint(math.degrees(lat_m), math.degrees(lon_m))


def intermediate_point(p1: Any, p2: Any, fraction: float) -> GeoPoint:
    """
    Point at a given fraction of the way along the great circle from p1 to p2.

    Args:
        fraction: 0 gives p1, 1 gives p2

    Returns:
        New GeoPoint; a copy of p1 when the points coincide
    """
    p1, p2 = as_point(p1), as_point(p2)
    fraction = as_number(fraction, 'fraction')
    if p1.equals(p2):
        return GeoPoint(p1.latitude, p1.longitude)

    lat1 = math.radians(p1.latitude)
    lon1 = math.radians(p1.longitude)
    lat2 = math.radians(p2.latitude)
    lon2 = math.radians(p2.longitude)

    delta = _angular_distance(p1, p2)

    a = math.sin((1 - fraction) * delta) / math.sin(delta)
    b = math.sin(fraction * delta) / math.sin(delta)

    x = a * math.cos(lat1) * math.cos(lon1) + b * math.cos(lat2) * math.cos(lon2)
    y = a * math.cos(lat1) * math.sin(lon1) + b * math.cos(lat2) * math.sin(lon2)
    z = a * math.sin(lat1) + b * math.sin(lat2)

    lat3 = math.atan2(z, math.sqrt(x * x + y * y))
    lon3 = math.atan2(y, x)

    return GeoPoint(math.degrees(lat3), math.degrees(lon3))


def destination_point(start: Any, distance: float, bearing: float,
                      radius: float = DEFAULT_RADIUS) -> GeoPoint:
    """
    Point reached travelling the given distance from start on the given initial bearing.

    Args:
        start: Start point
        distance: Distance travelled, in the same units as radius
        bearing: Initial bearing in degrees from north
        radius: Earth radius (defaults to mean radius in metres)

    Returns:
        New GeoPoint at the calculated position

    Example:
        >>> destination_point((51.47788, -0.00147), 7794, 300.7)
        GeoPoint(name=None, latitude=51.5135..., longitude=-0.0983...)
    """
    start = as_point(start)
    distance = as_number(distance, 'distance')
    bearing = as_number(bearing, 'bearing')
    radius = check_radius(radius)

    delta = distance / radius  # angular distance in radians
    theta = math.radians(bearing)

    lat1 = math.radians(start.latitude)
    lon1 = math.radians(start.longitude)

    sin_lat2 = math.sin(lat1) * math.cos(delta) + math.cos(lat1) * math.sin(delta) * math.cos(theta)
    lat2 = math.asin(_clamp(sin_lat2))
    y = math.sin(theta) * math.sin(delta) * math.cos(lat1)
    x = math.cos(delta) - math.sin(lat1) * sin_lat2
    lon2 = lon1 + math.atan2(y, x)

    return GeoPoint(math.degrees(lat2), math.degrees(lon2))


def resolve_intersection(p1: Any, bearing1: float, p2: Any, bearing2: float) -> Resolution:
    """
    Intersection of two great circle paths, each given by a point and a bearing.

    Returns:
        Resolution with outcome OK and the intersection point; COINCIDENT
        with a copy of p1 when both paths start at the same point; INFINITE
        (no value) when the paths lie on the same great circle; AMBIGUOUS
        (no value) when the intersection is antipodal or needs going the
        wrong way round
    """
    p1, p2 = as_point(p1), as_point(p2)
    bearing1 = as_number(bearing1, 'bearing1')
    bearing2 = as_number(bearing2, 'bearing2')

    lat1 = math.radians(p1.latitude)
    lon1 = math.radians(p1.longitude)
    lat2 = math.radians(p2.latitude)
    lon2 = math.radians(p2.longitude)
    theta13 = math.radians(bearing1)
    theta23 = math.radians(bearing2)
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    # angular distance p1-p2
    delta12 = 2 * math.asin(_clamp(math.sqrt(
        math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )))
    if abs(delta12) < sys.float_info.epsilon:
        logger.debug("Intersection of paths from coincident points")
        return Resolution(Outcome.COINCIDENT, GeoPoint(p1.latitude, p1.longitude))

    # initial/final bearings between the points
    cos_theta_a = (math.sin(lat2) - math.sin(lat1) * math.cos(delta12)) / (math.sin(delta12) * math.cos(lat1))
    cos_theta_b = (math.sin(lat1) - math.sin(lat2) * math.cos(delta12)) / (math.sin(delta12) * math.cos(lat2))
    theta_a = math.acos(_clamp(cos_theta_a))
    theta_b = math.acos(_clamp(cos_theta_b))

    if math.sin(dlon) > 0:
        theta12, theta21 = theta_a, 2 * math.pi - theta_b
    else:
        theta12, theta21 = 2 * math.pi - theta_a, theta_b

    alpha1 = theta13 - theta12  # angle 2-1-3
    alpha2 = theta21 - theta23  # angle 1-2-3

    if abs(math.sin(alpha1)) < COLLINEAR_SINE_TOLERANCE and abs(math.sin(alpha2)) < COLLINEAR_SINE_TOLERANCE:
        logger.debug("Paths lie on the same great circle: infinite intersections")
        return Resolution(Outcome.INFINITE)
    if math.sin(alpha1) * math.sin(alpha2) < 0:
        logger.debug("Ambiguous intersection (antipodal or 360°)")
        return Resolution(Outcome.AMBIGUOUS)

    cos_alpha3 = -math.cos(alpha1) * math.cos(alpha2) + math.sin(alpha1) * math.sin(alpha2) * math.cos(delta12)

    delta13 = math.atan2(
        math.sin(delta12) * math.sin(alpha1) * math.sin(alpha2),
        math.cos(alpha2) + math.cos(alpha1) * cos_alpha3
    )

    lat3 = math.asin(_clamp(
        math.sin(lat1) * math.cos(delta13) + math.cos(lat1) * math.sin(delta13) * math.cos(theta13)
    ))

    dlon13 = math.atan2(
        math.sin(theta13) * math.sin(delta13) * math.cos(lat1),
        math.cos(delta13) - math.sin(lat1) * math.sin(lat3)
    )
    lon3 = lon1 + dlon13

    return Resolution(Outcome.OK, GeoPoint(math.degrees(lat3), math.degrees(lon3)))


def intersection(p1: Any, bearing1: float, p2: Any, bearing2: float) -> Optional[GeoPoint]:
    """
    Intersection point of two paths defined by point and bearing.

    Returns:
        The intersection point, a copy of p1 if p1 and p2 coincide, or None
        if there is no unique intersection

    Example:
        >>> intersection((51.8853, 0.2545), 108.547, (49.0034, 2.5735), 32.435)
        GeoPoint(name=None, latitude=50.9077..., longitude=4.5084...)
    """
    return resolve_intersection(p1, bearing1, p2, bearing2).value


def cross_track_distance(point: Any, path_start: Any, path_end: Any,
                         radius: float = DEFAULT_RADIUS) -> float:
    """
    Signed distance from a point to the great circle through path_start and path_end.

    Returns:
        Distance in units of radius: negative if left of the path, positive
        if right; 0 at path_start; NaN if the path points coincide
    """
    point, path_start, path_end = as_point(point), as_point(path_start), as_point(path_end)
    radius = check_radius(radius)

    if point.equals(path_start):
        return 0.0

    bearing_path = initial_bearing(path_start, path_end)
    if bearing_path is None:
        logger.debug("Cross track distance undefined for a zero length path")
        return math.nan

    delta13 = _angular_distance(path_start, point)
    theta13 = math.radians(initial_bearing(path_start, point))
    theta12 = math.radians(bearing_path)

    delta_xt = math.asin(_clamp(math.sin(delta13) * math.sin(theta13 - theta12)))

    return delta_xt * radius


def along_track_distance(point: Any, path_start: Any, path_end: Any,
                         radius: float = DEFAULT_RADIUS) -> float:
    """
    Distance from path_start to the foot of the perpendicular from point onto the path.

    Returns:
        Distance in units of radius, negative when the foot lies behind
        path_start; 0 at path_start; NaN if the path points coincide
    """
    point, path_start, path_end = as_point(point), as_point(path_start), as_point(path_end)
    radius = check_radius(radius)

    if point.equals(path_start):
        return 0.0

    bearing_path = initial_bearing(path_start, path_end)
    if bearing_path is None:
        logger.debug("Along track distance undefined for a zero length path")
        return math.nan

    delta13 = _angular_distance(path_start, point)
    theta13 = math.radians(initial_bearing(path_start, point))
    theta12 = math.radians(bearing_path)

    delta_xt = math.asin(_clamp(math.sin(delta13) * math.sin(theta13 - theta12)))
    delta_at = math.acos(_clamp(math.cos(delta13) / abs(math.cos(delta_xt))))

    direction = math.cos(theta12 - theta13)
    sign = (direction > 0) - (direction < 0)

    return delta_at * sign * radius


def distance_to_segment(point: Any, line_start: Any, line_end: Any,
                        radius: float = DEFAULT_RADIUS) -> float:
    """
    Distance from a point to the great circle segment between two points.

    Returns the cross track distance when the perpendicular from the point
    falls within the segment, otherwise the distance to the nearer end.
    """
    point, line_start, line_end = as_point(point), as_point(line_start), as_point(line_end)
    radius = check_radius(radius)

    dist_ap = distance(line_start, point, radius)
    dist_bp = distance(line_end, point, radius)
    dist_ab = distance(line_start, line_end, radius)

    # If segment is very short, just return distance to closest endpoint
    if dist_ab / radius < SHORT_SEGMENT_ANGLE:
        return min(dist_ap, dist_bp)

    d_at = along_track_distance(point, line_start, line_end, radius)
    if d_at < 0:
        return dist_ap  # closest to start
    if d_at > dist_ab:
        return dist_bp  # closest to end
    return abs(cross_track_distance(point, line_start, line_end, radius))


def max_latitude(point: Any, bearing: float) -> float:
    """
    Maximum latitude reached on a great circle leaving point on bearing (Clairaut's formula).

    Negate the result for the minimum latitude in the southern hemisphere.
    The result is the same for all points on a given latitude.
    """
    point = as_point(point)
    theta = math.radians(as_number(bearing, 'bearing'))
    lat = math.radians(point.latitude)

    lat_max = math.acos(_clamp(abs(math.sin(theta) * math.cos(lat))))

    return math.degrees(lat_max)


def resolve_crossing_parallels(p1: Any, p2: Any, latitude: float) -> Resolution:
    """
    Meridians at which the great circle through p1 and p2 crosses a latitude.

    Returns:
        Resolution with outcome OK and a (lon1, lon2) tuple; COINCIDENT when
        p1 and p2 are the same point; NOT_REACHED when the great circle never
        gets to that latitude
    """
    p1, p2 = as_point(p1), as_point(p2)
    latitude = as_number(latitude, 'latitude')
    if p1.equals(p2):
        logger.debug("Great circle undefined through coincident points")
        return Resolution(Outcome.COINCIDENT)

    lat = math.radians(latitude)

    lat1 = math.radians(p1.latitude)
    lon1 = math.radians(p1.longitude)
    lat2 = math.radians(p2.latitude)
    lon2 = math.radians(p2.longitude)

    dlon = lon2 - lon1

    x = math.sin(lat1) * math.cos(lat2) * math.cos(lat) * math.sin(dlon)
    y = math.sin(lat1) * math.cos(lat2) * math.cos(lat) * math.cos(dlon) - math.cos(lat1) * math.sin(lat2) * math.cos(lat)
    z = math.cos(lat1) * math.cos(lat2) * math.sin(lat) * math.sin(dlon)

    if z * z > x * x + y * y:
        logger.debug(f"Great circle does not reach latitude {latitude}")
        return Resolution(Outcome.NOT_REACHED)
    if x * x + y * y == 0:
        # the great circle is the parallel itself (equator)
        return Resolution(Outcome.INFINITE)

    lon_max = math.atan2(-y, x)  # longitude at max latitude
    dlon_i = math.acos(_clamp(z / math.sqrt(x * x + y * y)))  # from lon_max to the crossings

    lon_i1 = lon1 + lon_max - dlon_i
    lon_i2 = lon1 + lon_max + dlon_i

    return Resolution(Outcome.OK, (wrap180(math.degrees(lon_i1)), wrap180(math.degrees(lon_i2))))


def crossing_parallels(p1: Any, p2: Any, latitude: float) -> Optional[Tuple[float, float]]:
    """
    Pair of longitudes where the great circle through p1 and p2 crosses latitude.

    Returns:
        (lon1, lon2) tuple, or None if the latitude is never reached or the
        points coincide
    """
    return resolve_crossing_parallels(p1, p2, latitude).value
