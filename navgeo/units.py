"""
Earth radius and distance unit conversions.

Distances in navgeo are expressed in the units of the radius passed to each
calculation; the default radius is the mean earth radius in metres.
"""

import os
import logging

logger = logging.getLogger(__name__)

# Mean earth radius
EARTH_RADIUS_M = 6371e3
EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_MILES = 3959.0
EARTH_RADIUS_NM = 3440.065

METRES_PER_NAUTICAL_MILE = 1852.0
METRES_PER_MILE = 1609.344

# Conversion factors; 1000 * METRES_TO_KM gives 1
METRES_TO_KM = 1 / 1000
METRES_TO_MILES = 1 / METRES_PER_MILE
METRES_TO_NAUTICAL_MILES = 1 / METRES_PER_NAUTICAL_MILE


def _radius_from_env() -> float:
    raw = os.getenv("NAVGEO_EARTH_RADIUS_M")
    if raw is None:
        return EARTH_RADIUS_M
    try:
        radius = float(raw)
    except ValueError:
        logger.warning(f"Ignoring NAVGEO_EARTH_RADIUS_M={raw!r}: not a number")
        return EARTH_RADIUS_M
    if radius <= 0:
        logger.warning(f"Ignoring NAVGEO_EARTH_RADIUS_M={raw!r}: must be positive")
        return EARTH_RADIUS_M
    return radius


# Radius used when a calculation is not given one
DEFAULT_RADIUS = _radius_from_env()


def metres_to_km(metres: float) -> float:
    return metres * METRES_TO_KM


def km_to_metres(km: float) -> float:
    return km * 1000


def metres_to_miles(metres: float) -> float:
    return metres * METRES_TO_MILES


def miles_to_metres(miles: float) -> float:
    return miles * METRES_PER_MILE


def metres_to_nm(metres: float) -> float:
    return metres * METRES_TO_NAUTICAL_MILES


def nm_to_metres(nm: float) -> float:
    return nm * METRES_PER_NAUTICAL_MILE
