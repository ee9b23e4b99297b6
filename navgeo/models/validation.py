"""
Validation module for navgeo inputs.

Provides result types so callers can validate many angles or points in one
pass and collect the problems, instead of stopping at the first exception.
"""

import math
from dataclasses import dataclass, field
from typing import List, Any

from ..exceptions import GeodesyError
from ..utils.angle_wrap import wrap90, wrap180, wrap360
from ..utils.dms import parse


@dataclass
class ValidationError:
    """Represents a single validation error."""

    field: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.field}: {self.message} (value: {self.value!r})"
        return f"{self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Result of a validation operation; `value` holds the normalized input when valid."""

    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    value: Any = None

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if validation has warnings."""
        return len(self.warnings) > 0

    def add_error(self, field: str, message: str, value: Any = None) -> None:
        """Add a validation error."""
        self.errors.append(ValidationError(field, message, value))

    def add_warning(self, message: str) -> None:
        """Add a validation warning."""
        self.warnings.append(message)

    @classmethod
    def success(cls, value: Any = None) -> 'ValidationResult':
        """Create a successful validation result."""
        return cls(errors=[], value=value)

    @classmethod
    def error(cls, field: str, message: str, value: Any = None) -> 'ValidationResult':
        """Create a validation result with a single error."""
        return cls(errors=[ValidationError(field, message, value)])

    def __str__(self) -> str:
        if self.is_valid:
            if self.has_warnings:
                return f"Valid (with {len(self.warnings)} warnings)"
            return "Valid"
        return f"Invalid ({len(self.errors)} errors)"

    def get_error_messages(self) -> List[str]:
        """Get all error messages as strings."""
        return [str(error) for error in self.errors]


# kind -> (wrap function, description of the canonical range)
ANGLE_KINDS = {
    'lat': (wrap90, '-90..90'),
    'lon': (wrap180, '-180..180'),
    'bearing': (wrap360, '0..360'),
    'angle': (None, None),
}


def validate_angle(value: Any, kind: str = 'angle') -> ValidationResult:
    """
    Validate a numeric or deg/min/sec angle.

    Args:
        value: Number or text accepted by dms.parse
        kind: 'lat', 'lon', 'bearing' or 'angle' (no range normalization)

    Returns:
        ValidationResult whose value is the parsed and normalized degrees;
        a warning is added when the value had to be wrapped into range
    """
    if kind not in ANGLE_KINDS:
        return ValidationResult.error('kind', 'unknown angle kind', kind)

    degrees = parse(value)
    if not math.isfinite(degrees):
        return ValidationResult.error(kind, 'not a valid angle', value)

    wrap, described_range = ANGLE_KINDS[kind]
    result = ValidationResult.success(degrees)
    if wrap is not None:
        result.value = wrap(degrees)
        if result.value != degrees:
            result.add_warning(f"{kind} {degrees} outside {described_range}, wrapped to {result.value}")
    return result


def validate_radius(value: Any) -> ValidationResult:
    """Validate an earth radius (a positive finite number)."""
    if isinstance(value, bool):
        return ValidationResult.error('radius', 'not a number', value)
    try:
        radius = float(value)
    except (TypeError, ValueError):
        return ValidationResult.error('radius', 'not a number', value)
    if not math.isfinite(radius):
        return ValidationResult.error('radius', 'not finite', value)

    if radius <= 0:
        return ValidationResult.error('radius', 'not positive', value)
    return ValidationResult.success(radius)


def validate_point(*args: Any) -> ValidationResult:
    """
    Validate a point-like literal without raising.

    Accepts the same forms as GeoPoint.parse; the result value is the GeoPoint.
    """
    from .geopoint import GeoPoint

    try:
        point = GeoPoint.parse(*args)
    except GeodesyError as e:
        return ValidationResult.error('point', str(e), args[0] if len(args) == 1 else args)
    return ValidationResult.success(point)


def validate_points(points: List[Any]) -> ValidationResult:
    """
    Validate a list of point-likes, collecting every error.

    The result value is the list of GeoPoints when all are valid.
    """
    result = ValidationResult()
    parsed = []
    for index, candidate in enumerate(points):
        single = validate_point(candidate)
        if single.is_valid:
            parsed.append(single.value)
        else:
            for error in single.errors:
                result.add_error(f"points[{index}]", error.message, candidate)
    if result.is_valid:
        result.value = parsed
    return result
