"""
Positions given relative to a reference point.

Charts and procedures often locate a fix as a magnetic bearing and a
distance from an aerodrome reference point, e.g. "050° MAG 8.5NM from ARP".
This module turns such descriptions into coordinates, one at a time with
RelativeFix or for a whole table with fixes_to_frame.

Example:
    >>> arp = GeoPoint.parse('34 42 09S', '138 37 15E')
    >>> fix = RelativeFix(arp, magnetic_bearing=50, distance_m='8.5NM', variation=8)
    >>> fix.position.to_string('dms')
"""

import re
import math
import logging
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Iterable, Mapping, Optional, Union

import pandas as pd

from .config import DmsConfig
from .exceptions import InvalidAngleError
from .geodesy.base import as_point, as_number
from .geodesy.great_circle import destination_point
from .models.geopoint import GeoPoint
from .units import DEFAULT_RADIUS, METRES_PER_NAUTICAL_MILE, metres_to_nm
from .utils import dms
from .utils.angle_wrap import wrap360

logger = logging.getLogger(__name__)

# Metres per unit for the suffixes accepted by parse_distance
DISTANCE_UNITS = {
    '': 1.0,
    'M': 1.0,
    'KM': 1000.0,
    'NM': METRES_PER_NAUTICAL_MILE,
}

DISTANCE_PATTERN = re.compile(r'^\s*(\d+(?:\.\d*)?|\.\d+)\s*(NM|KM|M)?\s*$', re.IGNORECASE)

# Columns added by fixes_to_frame
FIX_COLUMNS = [
    'label',
    'magnetic_bearing',
    'variation',
    'true_bearing',
    'distance_m',
    'distance_nm',
    'latitude',
    'longitude',
    'position_dms',
]


def parse_distance(value: Any) -> float:
    """
    Parse a distance with an optional unit suffix into metres.

    Args:
        value: Number (metres) or text such as '500M', '1.2NM', '3 km', '750'

    Returns:
        Distance in metres, or NaN when the value cannot be read

    Example:
        >>> parse_distance('1.2NM')
        2222.4
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, Real):
        return float(value)
    if not isinstance(value, str):
        return math.nan

    match = DISTANCE_PATTERN.match(value)
    if not match:
        logger.debug(f"Cannot parse distance '{value}'")
        return math.nan

    number, unit = match.groups()
    return float(number) * DISTANCE_UNITS[(unit or '').upper()]


def magnetic_to_true(bearing: Any, variation: Any) -> float:
    """
    Convert a magnetic bearing to a true bearing.

    Args:
        bearing: Magnetic bearing in degrees
        variation: Magnetic variation in degrees, east positive

    Returns:
        True bearing in 0..360
    """
    return wrap360(as_number(bearing, 'bearing') + as_number(variation, 'variation'))


@dataclass
class RelativeFix:
    """
    A position described by magnetic bearing and distance from a reference point.

    Attributes:
        reference: Reference point (any point-like value)
        magnetic_bearing: Bearing from the reference, degrees magnetic
        distance_m: Distance in metres, or text accepted by parse_distance
        variation: Magnetic variation at the reference, east positive
        label: Optional name given to the computed position
    """

    reference: GeoPoint
    magnetic_bearing: float
    distance_m: float
    variation: float = 0.0
    label: Optional[str] = None

    def __post_init__(self):
        self.reference = as_point(self.reference)
        self.magnetic_bearing = as_number(self.magnetic_bearing, 'bearing')
        self.variation = as_number(self.variation, 'variation')

        distance = parse_distance(self.distance_m)
        if not math.isfinite(distance) or distance < 0:
            raise InvalidAngleError('distance', self.distance_m)
        self.distance_m = distance

    @property
    def true_bearing(self) -> float:
        return magnetic_to_true(self.magnetic_bearing, self.variation)

    @property
    def distance_nm(self) -> float:
        return metres_to_nm(self.distance_m)

    @property
    def position(self) -> GeoPoint:
        """Great circle destination from the reference on the true bearing."""
        point = destination_point(self.reference, self.distance_m, self.true_bearing, DEFAULT_RADIUS)
        point.name = self.label
        return point

    def to_dict(self, config: Optional[DmsConfig] = None) -> Dict[str, Any]:
        position = self.position
        return {
            'label': self.label,
            'magnetic_bearing': self.magnetic_bearing,
            'variation': self.variation,
            'true_bearing': self.true_bearing,
            'distance_m': self.distance_m,
            'distance_nm': self.distance_nm,
            'latitude': position.latitude,
            'longitude': position.longitude,
            'position_dms': position.to_string('dms', config=config),
        }


def _unresolved_record(label: Any, bearing: float, variation: float, distance: float) -> Dict[str, Any]:
    return {
        'label': label,
        'magnetic_bearing': bearing,
        'variation': variation,
        'true_bearing': math.nan,
        'distance_m': distance,
        'distance_nm': metres_to_nm(distance) if math.isfinite(distance) else math.nan,
        'latitude': math.nan,
        'longitude': math.nan,
        'position_dms': dms.NOT_FORMATTABLE,
    }


def _fix_record(reference: GeoPoint, row: Mapping[str, Any], variation: float,
                config: Optional[DmsConfig]) -> Dict[str, Any]:
    label = row.get('label')
    if label is not None and pd.isna(label):
        label = None

    row_variation = row.get('variation')
    if row_variation is None or pd.isna(row_variation):
        row_variation = variation

    bearing = dms.parse(row.get('bearing'))
    distance = parse_distance(row.get('distance'))
    if not math.isfinite(bearing) or not math.isfinite(distance) or distance < 0:
        logger.warning(f"Cannot resolve fix {label or ''} from bearing '{row.get('bearing')}' "
                       f"and distance '{row.get('distance')}'")
        return _unresolved_record(label, bearing, row_variation, distance)

    fix = RelativeFix(reference, bearing, distance, row_variation, label)
    return fix.to_dict(config)


def fixes_to_frame(reference: Any, rows: Union[pd.DataFrame, Iterable[Mapping[str, Any]]],
                   variation: float = 0.0, config: Optional[DmsConfig] = None) -> pd.DataFrame:
    """
    Compute the positions of a table of fixes relative to one reference point.

    Args:
        reference: Reference point (any point-like value)
        rows: DataFrame or iterable of mappings with 'bearing' (degrees
            magnetic, number or deg/min/sec text) and 'distance' (metres or
            text accepted by parse_distance) and optionally 'label' and a
            per-row 'variation'
        variation: Magnetic variation used for rows without their own
        config: Formatting config for the position_dms column

    Returns:
        The input rows with the FIX_COLUMNS added. Rows whose bearing or
        distance cannot be read get NaN coordinates instead of failing the
        whole table.

    Raises:
        ValueError: If the bearing or distance column is missing
    """
    reference = as_point(reference)
    variation = as_number(variation, 'variation')

    if isinstance(rows, pd.DataFrame):
        df = rows.copy()
    else:
        df = pd.DataFrame(list(rows))

    if df.empty:
        return pd.DataFrame(columns=list(df.columns) + [c for c in FIX_COLUMNS if c not in df.columns])

    missing = [column for column in ('bearing', 'distance') if column not in df.columns]
    if missing:
        raise ValueError(f"Missing columns: {', '.join(missing)}")

    records = [_fix_record(reference, row, variation, config) for row in df.to_dict('records')]
    computed = pd.DataFrame(records, index=df.index, columns=FIX_COLUMNS)

    df = df.drop(columns=[c for c in FIX_COLUMNS if c in df.columns])
    result = df.join(computed)

    logger.debug(f"Resolved {computed['latitude'].notna().sum()} of {len(computed)} fixes from {reference}")
    return result
