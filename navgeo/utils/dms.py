"""
Degree/minute/second angle parsing and formatting.

This module converts between decimal degrees and the sexagesimal strings used
on charts and in aeronautical publications:

- parse: flexible text (signed decimal, d m s with any separators, optional
  compass suffix) to decimal degrees, NaN when the text is not an angle
- to_dms / to_lat / to_lon / to_brng: decimal degrees to display strings
- from_locale / to_locale: swap locale thousands/decimal markers
- compass_point: bearing to N, NNE, NE...
- parse_compact: fixed-width ICAO coordinate pairs such as 4901N00225E

Formatting never raises for bad input; it returns None (or '–' for the
lat/lon/bearing helpers) so display code keeps going.
"""

import re
import math
import logging
from decimal import Decimal, ROUND_HALF_UP
from numbers import Real
from typing import Any, Optional, Tuple

from ..config import DmsConfig, resolve_config
from ..exceptions import InvalidAngleError, InvalidFormatError
from .angle_wrap import wrap90, wrap180, wrap360

logger = logging.getLogger(__name__)

DEGREE = '°'
PRIME = '′'
DOUBLE_PRIME = '″'

# Returned by the lat/lon/bearing helpers when a value cannot be formatted
NOT_FORMATTABLE = '–'

# Default number of decimal places per format
DEFAULT_DECIMAL_PLACES = {
    'd': 4, 'deg': 4,
    'dm': 2, 'deg+min': 2,
    'dms': 0, 'deg+min+sec': 0,
}

CARDINALS = [
    'N', 'NNE', 'NE', 'ENE',
    'E', 'ESE', 'SE', 'SSE',
    'S', 'SSW', 'SW', 'WSW',
    'W', 'WNW', 'NW', 'NNW',
]

SIGNED_DECIMAL_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')
PART_SEPARATOR_PATTERN = re.compile(r'[^0-9.,]+')
NEGATIVE_PATTERN = re.compile(r'^-|[WS]$', re.IGNORECASE)

# DDMM[SS]N DDDMM[SS]E, e.g. 4901N00225E or 344209S1383715E
COMPACT_PATTERN = re.compile(
    r'^\s*(\d{2})(\d{2})(\d{2}(?:\.\d+)?)?\s*([NS])'
    r'\s*(\d{3})(\d{2})(\d{2}(?:\.\d+)?)?\s*([EW])\s*$',
    re.IGNORECASE
)


def _as_number(value: Any) -> Optional[float]:
    """Finite float for numbers and numeric strings, None for anything else."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Real):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def to_fixed(value: float, dp: int) -> str:
    """Round half up to dp decimal places, like a fixed-point display would."""
    quantum = Decimal(1).scaleb(-dp)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:.{dp}f}"


def parse(value: Any) -> float:
    """
    Parse degrees or deg/min/sec text into decimal degrees.

    Accepts signed decimal degrees, or degrees, minutes and seconds separated
    by any non-numeric characters and optionally suffixed by a compass letter.
    Thousands/decimal separators must be comma/dot; use from_locale first for
    locale formatted text.

    Args:
        value: Number or string, e.g. -3.62, '3 37 12W', '3°37′12″W'

    Returns:
        Decimal degrees, or NaN if the value cannot be read as an angle

    Example:
        >>> parse('51° 28′ 40.37″ N')
        51.47788...
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, Real):
        return float(value)
    if not isinstance(value, str):
        logger.debug(f"Cannot parse angle from {type(value).__name__}")
        return math.nan

    text = value.strip()
    if SIGNED_DECIMAL_PATTERN.match(text):
        return float(text)

    # strip off any sign or compass direction and split out separate d/m/s
    stripped = re.sub(r'[NSEW]$', '', text[1:] if text.startswith('-') else text, flags=re.IGNORECASE)
    parts = PART_SEPARATOR_PATTERN.split(stripped)
    if parts and parts[-1] == '':
        parts.pop()  # trailing symbol
    if parts and parts[0] == '':
        parts.pop(0)  # leading symbol

    if not parts or len(parts) > 3:
        logger.debug(f"Cannot parse angle '{value}': {len(parts)} numeric parts")
        return math.nan

    try:
        numbers = [float(part) for part in parts]
    except ValueError:
        logger.debug(f"Cannot parse angle '{value}': non-numeric part in {parts}")
        return math.nan

    if len(numbers) == 3:
        degrees = numbers[0] + numbers[1] / 60 + numbers[2] / 3600
    elif len(numbers) == 2:
        degrees = numbers[0] + numbers[1] / 60
    else:
        degrees = numbers[0]

    if NEGATIVE_PATTERN.search(text):
        degrees = -degrees

    return degrees


def to_dms(value: Any, fmt: str = 'd', dp: Optional[int] = None,
           config: Optional[DmsConfig] = None) -> Optional[str]:
    """
    Convert decimal degrees to an unsigned deg/min/sec string.

    Degree, prime and double prime symbols are added; the sign is discarded
    and no compass letter is added. Degrees are zero-padded to 3 digits.

    Args:
        value: Degrees to format
        fmt: 'd', 'dm' or 'dms' (also 'deg', 'deg+min', 'deg+min+sec');
            anything else formats as 'd'
        dp: Decimal places; default 4 for d, 2 for dm, 0 for dms
        config: Formatting config (default: process-wide config)

    Returns:
        Formatted string, or None for NaN, infinite, blank, boolean or
        non-numeric input
    """
    number = _as_number(value)
    if number is None:
        return None

    if fmt not in DEFAULT_DECIMAL_PLACES:
        if dp is None:
            dp = 4
        fmt = 'd'
    elif dp is None:
        dp = DEFAULT_DECIMAL_PLACES[fmt]

    sep = resolve_config(config).separator
    deg = abs(number)

    if fmt in ('dm', 'deg+min'):
        d = math.floor(deg)
        m = to_fixed((deg * 60) % 60, dp)
        if float(m) == 60:  # rounding up
            m = to_fixed(0, dp)
            d += 1
        if float(m) < 10:
            m = '0' + m
        return f"{d:03d}{DEGREE}{sep}{m}{PRIME}"

    if fmt in ('dms', 'deg+min+sec'):
        d = math.floor(deg)
        m = math.floor((deg * 3600) / 60) % 60
        s = to_fixed(deg * 3600 % 60, dp)
        if float(s) == 60:  # rounding up
            s = to_fixed(0, dp)
            m += 1
        if m == 60:
            m = 0
            d += 1
        if float(s) < 10:
            s = '0' + s
        return f"{d:03d}{DEGREE}{sep}{m:02d}{PRIME}{sep}{s}{DOUBLE_PRIME}"

    d = to_fixed(deg, dp)
    if float(d) < 100:
        d = '0' + d
    if float(d) < 10:
        d = '0' + d
    return f"{d}{DEGREE}"


def to_lat(value: Any, fmt: str = 'd', dp: Optional[int] = None,
           config: Optional[DmsConfig] = None) -> str:
    """
    Convert decimal degrees to a latitude string with 2-digit degrees and N/S.

    Example:
        >>> to_lat(-3.62, 'dms', config=DmsConfig(separator=''))
        '03°37′12″S'
    """
    number = _as_number(value)
    if number is None:
        return NOT_FORMATTABLE
    lat = wrap90(number)
    formatted = to_dms(lat, fmt, dp, config)
    if formatted is None:
        return NOT_FORMATTABLE
    hemisphere = 'S' if lat < 0 else 'N'
    # latitude degrees never need the third digit
    return formatted[1:] + resolve_config(config).separator + hemisphere


def to_lon(value: Any, fmt: str = 'd', dp: Optional[int] = None,
           config: Optional[DmsConfig] = None) -> str:
    """Convert decimal degrees to a longitude string with 3-digit degrees and E/W."""
    number = _as_number(value)
    if number is None:
        return NOT_FORMATTABLE
    lon = wrap180(number)
    formatted = to_dms(lon, fmt, dp, config)
    if formatted is None:
        return NOT_FORMATTABLE
    return formatted + resolve_config(config).separator + ('W' if lon < 0 else 'E')


def to_brng(value: Any, fmt: str = 'd', dp: Optional[int] = None,
            config: Optional[DmsConfig] = None) -> str:
    """Convert decimal degrees to a bearing string in 0°..360°."""
    number = _as_number(value)
    if number is None:
        return NOT_FORMATTABLE
    formatted = to_dms(wrap360(number), fmt, dp, config)
    if formatted is None:
        return NOT_FORMATTABLE
    # rounding can take 359.99995 up to 360
    if formatted.startswith('360'):
        formatted = '0' + formatted[3:]
    return formatted


def from_locale(text: str, config: Optional[DmsConfig] = None) -> str:
    """
    Convert locale thousands/decimal separators to comma/dot for parsing.

    Separators are only converted when followed by a digit, so the ', '
    between latitude and longitude in a single string is left alone.

    Example:
        >>> from_locale('51°28′40,12″N', DmsConfig(thousands_separator='.', decimal_separator=','))
        '51°28′40.12″N'
    """
    config = resolve_config(config)
    placeholder = '⁜'
    if config.thousands_separator:
        text = re.sub(re.escape(config.thousands_separator) + r'(?=[0-9])', placeholder, text)
    text = re.sub(re.escape(config.decimal_separator) + r'(?=[0-9])', '.', text)
    return text.replace(placeholder, ',')


def to_locale(text: str, config: Optional[DmsConfig] = None) -> str:
    """
    Convert comma/dot thousands/decimal separators to the locale ones.

    Also usable for plain numbers such as distances.
    """
    config = resolve_config(config)
    placeholder = '⁜'
    text = re.sub(r',(?=[0-9])', placeholder, text)
    text = re.sub(r'\.(?=[0-9])', lambda _: config.decimal_separator, text)
    return text.replace(placeholder, config.thousands_separator)


def compass_point(bearing: Any, precision: int = 3) -> str:
    """
    Return the compass point for a bearing.

    Args:
        bearing: Bearing in degrees from north
        precision: 1 (cardinal), 2 (intercardinal) or 3 (secondary-intercardinal)

    Returns:
        Compass point name, e.g. 'N', 'NE', 'NNE'

    Raises:
        InvalidFormatError: If precision is not 1, 2 or 3
        InvalidAngleError: If bearing is not numeric

    Example:
        >>> compass_point(24)
        'NNE'
        >>> compass_point(24, 1)
        'N'
    """
    if isinstance(precision, bool) or precision not in (1, 2, 3):
        raise InvalidFormatError('precision', precision)
    precision = int(precision)

    number = _as_number(bearing)
    if number is None:
        raise InvalidAngleError('bearing', bearing)

    bearing = wrap360(number)
    n = 4 * 2 ** (precision - 1)  # compass points at this precision: 4, 8 or 16
    sector = math.floor(bearing * n / 360 + 0.5) % n
    return CARDINALS[sector * 16 // n]


def parse_compact(text: str) -> Optional[Tuple[float, float]]:
    """
    Parse a fixed-width ICAO coordinate pair to (lat, lon).

    Format: DDMM[SS]N/S DDDMM[SS]E/W, with optional whitespace between the
    latitude and longitude (e.g. '4901N00225E', '344209S 1383715E').

    Returns:
        (lat, lon) tuple in decimal degrees or None if the text does not match
    """
    if not text:
        return None

    match = COMPACT_PATTERN.match(text)
    if not match:
        logger.debug(f"Not a compact coordinate: '{text}'")
        return None

    lat_deg, lat_min, lat_sec, lat_dir, lon_deg, lon_min, lon_sec, lon_dir = match.groups()

    lat = int(lat_deg) + int(lat_min) / 60.0 + float(lat_sec or 0) / 3600.0
    if lat_dir.upper() == 'S':
        lat = -lat

    lon = int(lon_deg) + int(lon_min) / 60.0 + float(lon_sec or 0) / 3600.0
    if lon_dir.upper() == 'W':
        lon = -lon

    return (lat, lon)


# Names used by consumers of the codec
parse_angle = parse
format_angle = to_dms
format_lat = to_lat
format_lon = to_lon
format_bearing = to_brng
locale_to_canonical = from_locale
canonical_to_locale = to_locale
