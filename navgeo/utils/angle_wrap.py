"""
Angle normalization utilities.

Constrains degree values to latitude, longitude and bearing ranges using
triangle and sawtooth wave functions rather than trigonometry, so values that
are already in range come back untouched.
"""


def wrap90(degrees: float) -> float:
    """
    Constrain degrees to range -90..+90 (for latitude); e.g. -91 => -89, 91 => 89.

    Latitude wrapping is a triangle wave: f(x) = 4a/p * |(x - p/4) % p - p/2| - a
    with amplitude a = 90 and period p = 360.
    """
    if -90 <= degrees <= 90:
        return degrees

    x, a, p = degrees, 90, 360
    return 4 * a / p * abs((x - p / 4) % p - p / 2) - a


def wrap180(degrees: float) -> float:
    """
    Constrain degrees to range -180..+180 (for longitude); e.g. -181 => 179, 181 => -179.

    Longitude wrapping is a sawtooth wave: f(x) = (2ax/p - p/2) % p - a
    with amplitude a = 180 and period p = 360.
    """
    if -180 <= degrees <= 180:
        return degrees

    x, a, p = degrees, 180, 360
    return (2 * a * x / p - p / 2) % p - a


def wrap360(degrees: float) -> float:
    """
    Constrain degrees to range 0..360 (for bearings); e.g. -1 => 359, 361 => 1.

    Sawtooth wave shifted up by its amplitude: f(x) = (2ax/p) % p.
    """
    if 0 <= degrees < 360:
        return degrees

    x, a, p = degrees, 180, 360
    wrapped = (2 * a * x / p) % p
    # tiny negative inputs round up to exactly p
    return 0.0 if wrapped == p else wrapped


wrap_lat = wrap90
wrap_lon = wrap180
wrap_bearing = wrap360
