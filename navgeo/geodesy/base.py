"""
Argument handling shared by the geodesy functions.

Every public calculation normalizes its point arguments through the literal
grammar and validates its scalar arguments here, so the formulas themselves
only ever see GeoPoints and finite floats.
"""

import math
from numbers import Real
from typing import Any

from ..exceptions import InvalidAngleError
from ..models.geopoint import GeoPoint
from ..models.point_literal import to_point
from ..utils.dms import parse


def as_point(value: Any) -> GeoPoint:
    """GeoPoint for any point-like value (GeoPoint, (lat, lon), 'lat, lon', mapping, GeoJSON)."""
    if isinstance(value, GeoPoint):
        return value
    return to_point(value)


def as_number(value: Any, field: str) -> float:
    """Finite float for a number or numeric/deg-min-sec text."""
    if isinstance(value, bool) or value is None:
        raise InvalidAngleError(field, value)
    if isinstance(value, Real):
        number = float(value)
    elif isinstance(value, str):
        number = parse(value)
    else:
        raise InvalidAngleError(field, value)
    if not math.isfinite(number):
        raise InvalidAngleError(field, value)
    return number


def check_radius(radius: Any) -> float:
    """Positive finite radius; formulas divide by it."""
    number = as_number(radius, 'radius')
    if number <= 0:
        raise InvalidAngleError('radius', radius)
    return number
