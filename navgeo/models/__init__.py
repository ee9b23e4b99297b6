"""
Data models for the navgeo library.

This package contains the GeoPoint value type, the literal forms a point
can be given in, and result types for validating inputs without exceptions.
"""

from .geopoint import GeoPoint
from .point_literal import (
    PointLiteral,
    ExistingPoint,
    PointPair,
    PointString,
    PointMapping,
    GeoJsonPoint,
    classify,
    to_point,
)
from .validation import (
    ValidationError,
    ValidationResult,
    validate_angle,
    validate_point,
    validate_points,
    validate_radius,
)

__all__ = [
    # Core models
    'GeoPoint',
    # Point literals
    'PointLiteral',
    'ExistingPoint',
    'PointPair',
    'PointString',
    'PointMapping',
    'GeoJsonPoint',
    'classify',
    'to_point',
    # Validation
    'ValidationError',
    'ValidationResult',
    'validate_angle',
    'validate_point',
    'validate_points',
    'validate_radius',
]
