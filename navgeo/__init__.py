"""
navgeo - spherical earth navigation geometry.

Degree/minute/second parsing and formatting, a normalized GeoPoint, and
great circle and rhumb line calculations for flight planning and chart
work. The earth is modelled as a sphere; results are accurate to about
0.3%.
"""

from .config import DmsConfig, get_default_config, set_default_config
from .exceptions import GeodesyError, InvalidAngleError, InvalidFormatError
from .units import (
    EARTH_RADIUS_M,
    METRES_TO_KM,
    METRES_TO_MILES,
    METRES_TO_NAUTICAL_MILES,
    metres_to_km,
    km_to_metres,
    metres_to_miles,
    miles_to_metres,
    metres_to_nm,
    nm_to_metres,
)
from .utils import (
    wrap90,
    wrap180,
    wrap360,
    parse_angle,
    format_angle,
    format_lat,
    format_lon,
    format_bearing,
    locale_to_canonical,
    canonical_to_locale,
    compass_point,
    parse_compact,
)
from .models import GeoPoint, ValidationResult, validate_angle, validate_point, validate_radius
from .geodesy import (
    Outcome,
    Resolution,
    distance,
    initial_bearing,
    final_bearing,
    midpoint,
    intermediate_point,
    destination_point,
    intersection,
    resolve_intersection,
    cross_track_distance,
    along_track_distance,
    distance_to_segment,
    max_latitude,
    crossing_parallels,
    resolve_crossing_parallels,
    rhumb_distance,
    rhumb_bearing,
    rhumb_destination_point,
    rhumb_midpoint,
    area_of,
    is_pole_enclosed,
)

__version__ = '0.1.0'

__all__ = [
    'DmsConfig',
    'get_default_config',
    'set_default_config',
    'GeodesyError',
    'InvalidAngleError',
    'InvalidFormatError',
    'EARTH_RADIUS_M',
    'METRES_TO_KM',
    'METRES_TO_MILES',
    'METRES_TO_NAUTICAL_MILES',
    'metres_to_km',
    'km_to_metres',
    'metres_to_miles',
    'miles_to_metres',
    'metres_to_nm',
    'nm_to_metres',
    'wrap90',
    'wrap180',
    'wrap360',
    'parse_angle',
    'format_angle',
    'format_lat',
    'format_lon',
    'format_bearing',
    'locale_to_canonical',
    'canonical_to_locale',
    'compass_point',
    'parse_compact',
    'GeoPoint',
    'ValidationResult',
    'validate_angle',
    'validate_point',
    'validate_radius',
    'Outcome',
    'Resolution',
    'distance',
    'initial_bearing',
    'final_bearing',
    'midpoint',
    'intermediate_point',
    'destination_point',
    'intersection',
    'resolve_intersection',
    'cross_track_distance',
    'along_track_distance',
    'distance_to_segment',
    'max_latitude',
    'crossing_parallels',
    'resolve_crossing_parallels',
    'rhumb_distance',
    'rhumb_bearing',
    'rhumb_destination_point',
    'rhumb_midpoint',
    'area_of',
    'is_pole_enclosed',
]
