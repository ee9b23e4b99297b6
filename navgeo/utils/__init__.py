"""
Angle utilities: range wrapping and degree/minute/second conversion.
"""

from .angle_wrap import wrap90, wrap180, wrap360, wrap_lat, wrap_lon, wrap_bearing
from .dms import (
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

__all__ = [
    'wrap90',
    'wrap180',
    'wrap360',
    'wrap_lat',
    'wrap_lon',
    'wrap_bearing',
    'parse_angle',
    'format_angle',
    'format_lat',
    'format_lon',
    'format_bearing',
    'locale_to_canonical',
    'canonical_to_locale',
    'compass_point',
    'parse_compact',
]
