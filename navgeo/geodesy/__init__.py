"""
Spherical earth geodesy.

Great circle and rhumb line navigation and polygon area on a sphere of
configurable radius (default: mean earth radius in metres). Every function
is stateless and accepts point-like arguments.
"""

from .outcome import Outcome, Resolution
from .great_circle import (
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
)
from .rhumb import (
    rhumb_distance,
    rhumb_bearing,
    rhumb_destination_point,
    rhumb_midpoint,
)
from .area import area_of, is_pole_enclosed

__all__ = [
    # Outcomes
    'Outcome',
    'Resolution',
    # Great circle
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
    # Rhumb line
    'rhumb_distance',
    'rhumb_bearing',
    'rhumb_destination_point',
    'rhumb_midpoint',
    # Area
    'area_of',
    'is_pole_enclosed',
]
