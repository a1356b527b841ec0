"""
Parsing and presentation of degrees/minutes/seconds, plus the angle wrapping
helpers used throughout geodetics
"""

__all__ = [
    'compass_point', 'get_separator', 'parse', 'set_separator', 'to_brng', 'to_dms',
    'to_lat', 'to_lon', 'wrap180', 'wrap360', 'wrap90',
]

import math
import re
from typing import Optional, Union

_SEPARATOR = ''

_DEFAULT_DP = {'d': 4, 'dm': 2, 'dms': 0}

_COMPASS_POINTS = (
    'N', 'NNE', 'NE', 'ENE',
    'E', 'ESE', 'SE', 'SSE',
    'S', 'SSW', 'SW', 'WSW',
    'W', 'WNW', 'NW', 'NNW',
)

_RE_SIGN = re.compile(r'^-')
_RE_HEMISPHERE = re.compile(r'[NSEW]$', flags=re.IGNORECASE)
_RE_NEGATIVE = re.compile(r'^-|[WS]$', flags=re.IGNORECASE)
_RE_PART_SEPARATOR = re.compile(r'[^0-9.,]+')


def set_separator(separator: str) -> None:
    """
    Sets the separator placed between degrees, minutes, seconds and the
    compass direction in formatted output (default none).

    Args:
        separator:
            The separator, e.g. ' ' or ' ' (narrow no-break space)

    Returns:
        None
    """
    global _SEPARATOR  # pylint: disable=global-statement
    _SEPARATOR = separator


def get_separator() -> str:
    return _SEPARATOR


def parse(value: Union[float, int, str]) -> float:
    """
    Parses a string representing degrees/minutes/seconds into numeric degrees.

    Accepts signed decimal degrees, or deg-min-sec optionally suffixed by a
    compass direction (e.g. '51° 28′ 40.37″ N', '000°00′05.3″W', '51.4778N').
    Any non-numeric characters are treated as separators. South and west are
    returned negative, as is a leading '-'.

    Args:
        value:
            Degrees or deg/min/sec in a variety of formats

    Returns:
        The value as decimal degrees, or NaN if it cannot be parsed
    """
    if isinstance(value, bool):
        return math.nan

    if isinstance(value, (int, float)):
        return float(value)

    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    try:
        return float(text)
    except ValueError:
        pass

    stripped = _RE_HEMISPHERE.sub('', _RE_SIGN.sub('', text))
    parts = [part for part in _RE_PART_SEPARATOR.split(stripped) if part != '']
    try:
        parts = [float(part) for part in parts]
    except ValueError:
        return math.nan

    if len(parts) == 3:
        deg = parts[0] + parts[1] / 60 + parts[2] / 3600
    elif len(parts) == 2:
        deg = parts[0] + parts[1] / 60
    elif len(parts) == 1:
        deg = parts[0]
    else:
        return math.nan

    if _RE_NEGATIVE.search(text):
        deg = -deg

    return deg


def _pad(value: str, width: int) -> str:
    """Left-pads the integer part of a (possibly decimal) number with zeros"""
    integer, _, _ = value.partition('.')
    return '0' * (width - len(integer)) + value


def to_dms(deg: float, fmt: str = 'd', dp: Optional[int] = None) -> Optional[str]:
    """
    Converts decimal degrees to a deg/min/sec string, without a compass direction.

    Degrees are zero-padded to three digits. Rounding is carried up into the
    larger units (59.9995′ at dp 2 becomes a whole degree).

    Args:
        deg:
            Degrees to be formatted; the sign is discarded

        fmt:
            One of 'd' (degrees), 'dm' (degrees + minutes) or 'dms'
            (degrees + minutes + seconds). Unrecognised formats fall back to 'd'.

        dp:
            Number of decimal places on the last component; defaults to 4, 2
            and 0 respectively

    Returns:
        The formatted string, or None if deg is not a finite number
    """
    if isinstance(deg, bool) or deg is None:
        return None

    try:
        deg = float(deg)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(deg):
        return None

    if fmt not in _DEFAULT_DP:
        fmt, dp = 'd', None

    if dp is None:
        dp = _DEFAULT_DP[fmt]

    deg = abs(deg)

    if fmt == 'd':
        return _pad(f'{deg:.{dp}f}', 3) + '°'

    if fmt == 'dm':
        d = math.floor(deg)
        m = f'{(deg * 60) % 60:.{dp}f}'
        if float(m) == 60:
            m = f'{0:.{dp}f}'
            d += 1
        return f'{d:03d}°{_SEPARATOR}{_pad(m, 2)}′'

    d = math.floor(deg)
    m = math.floor(deg * 3600 / 60) % 60
    s = f'{(deg * 3600) % 60:.{dp}f}'
    if float(s) == 60:
        s = f'{0:.{dp}f}'
        m += 1
    if m == 60:
        m = 0
        d += 1
    return f'{d:03d}°{_SEPARATOR}{m:02d}′{_SEPARATOR}{_pad(s, 2)}″'


def to_lat(deg: float, fmt: str = 'd', dp: Optional[int] = None) -> str:
    """Formats a latitude as deg/min/sec with N/S suffix, e.g. '51.4779°N'"""
    deg = parse(deg)
    lat = to_dms(wrap90(deg), fmt, dp)
    if lat is None:
        return '–'

    # latitudes have two-digit degrees
    return lat[1:] + _SEPARATOR + ('S' if deg < 0 else 'N')


def to_lon(deg: float, fmt: str = 'd', dp: Optional[int] = None) -> str:
    """Formats a longitude as deg/min/sec with E/W suffix, e.g. '000.0015°W'"""
    deg = parse(deg)
    lon = to_dms(wrap180(deg), fmt, dp)
    if lon is None:
        return '–'

    return lon + _SEPARATOR + ('W' if deg < 0 else 'E')


def to_brng(deg: float, fmt: str = 'd', dp: Optional[int] = None) -> str:
    """Formats a bearing in the range 0..360°, e.g. '009.1419°'"""
    deg = parse(deg)
    brng = to_dms(wrap360(deg), fmt, dp)
    if brng is None:
        return '–'

    return brng.replace('360', '000', 1)


def compass_point(bearing: float, precision: int = 3) -> str:
    """
    Returns the compass point (to the given precision) for a bearing.

    Args:
        bearing:
            Bearing in degrees from north

        precision:
            1 (cardinal: N/E/S/W), 2 (intercardinal: NE etc.) or
            3 (secondary-intercardinal: NNE etc.)

    Returns:
        The compass point, e.g. 'NNE'
    """
    if precision not in (1, 2, 3):
        raise ValueError(f'invalid precision ‘{precision}’')

    bearing = wrap360(bearing)
    n = 4 * 2 ** (precision - 1)
    return _COMPASS_POINTS[int(math.floor(bearing * n / 360 + 0.5)) % n * 16 // n]


def wrap90(degrees: float) -> float:
    """Constrains degrees to the range -90..+90 (e.g. for latitude); -91 => -89, 91 => 89"""
    if -90 <= degrees <= 90:
        return degrees

    # triangle wave, amplitude 90, period 360
    return 4 * 90 / 360 * abs((((degrees - 90) % 360) + 360) % 360 - 180) - 90


def wrap180(degrees: float) -> float:
    """Constrains degrees to the range -180..+180 (e.g. for longitude); -181 => 179, 181 => -179"""
    if -180 <= degrees <= 180:
        return degrees

    # sawtooth wave, amplitude 180, period 360
    return (((degrees - 180) % 360) + 360) % 360 - 180


def wrap360(degrees: float) -> float:
    """Constrains degrees to the range 0..360 (e.g. for bearings); -1 => 359, 361 => 1"""
    if 0 <= degrees < 360:
        return degrees

    return ((degrees % 360) + 360) % 360
