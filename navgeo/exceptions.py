"""
Exceptions raised at the boundaries of the navgeo library.

Degenerate but valid geometry (coincident points, parallel paths, a latitude
never reached) is not reported through exceptions; see
``navgeo.geodesy.outcome`` for those.
"""

from typing import Any, Optional


class GeodesyError(Exception):
    """Base class for navgeo errors."""


class InvalidAngleError(GeodesyError, ValueError):
    """Raised when a latitude, longitude, bearing, distance or radius is not numeric."""

    def __init__(self, field: str, value: Any, message: Optional[str] = None):
        """
        Initialize the error.

        Args:
            field: Name of the offending argument (e.g. 'lat', 'radius')
            value: The value that was rejected
            message: Optional override of the default message
        """
        self.field = field
        self.value = value
        super().__init__(message or f"invalid {field} '{value}'")


class InvalidFormatError(GeodesyError, ValueError):
    """Raised for an unrecognized DMS format or compass precision."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"invalid {field} '{value}'")
