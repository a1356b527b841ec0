"""
Military Grid Reference System (MGRS/NATO) grid references, built on UTM.

An MGRS reference such as '31U DQ 48251 11932' comprises the UTM zone and 8°
latitude band ('31U'), the 100km grid square letters ('DQ'), and the easting
and northing within that square.
"""

from __future__ import annotations

__all__ = ['Mgrs', 'utm_to_mgrs']

import math
import re
from typing import List, Union

from geodetics._const import (
    MGRS_E100K_LETTERS, MGRS_LATITUDE_BANDS, MGRS_N100K_LETTERS, MGRS_PRECISIONS,
    UTM_FALSE_NORTHING, UTM_SCALE_FACTOR
)
from geodetics import datums, transverse_mercator
from geodetics.datums import Datum
from geodetics.exceptions import (
    InvalidBand, InvalidGridSquare, InvalidMgrsField, InvalidPrecision
)
from geodetics.utils.functions import coerce_float, coerce_int, round_half_up
from geodetics.utils.logging import warn_once
from geodetics.utm import Utm, central_meridian, latitude_band

_BANDS = MGRS_LATITUDE_BANDS[:-1]

_RE_MILITARY = re.compile(r'^(\d{1,2})([A-Z])([A-Z]{2})(\d*)$')
_RE_GRID_ZONE = re.compile(r'^(\d{1,2})([A-Z])$')


def utm_to_mgrs(utm: Utm) -> Mgrs:
    """
    Converts a UTM coordinate to an MGRS grid reference.

    Args:
        utm:
            The UTM coordinate

    Returns:
        Mgrs
    """
    # rounded so that points on a band boundary (e.g. 80°S) don't fall outside it
    lat = round_half_up(utm.to_latlon().lat, 12)
    band = latitude_band(lat)

    # columns in zone 1 are A-H, zone 2 J-R, zone 3 S-Z, then repeating every 3rd zone
    col = math.floor(utm.easting / 100e3)
    columns = MGRS_E100K_LETTERS[(utm.zone - 1) % 3]
    if not 1 <= col <= len(columns):
        raise InvalidGridSquare(f'UTM easting ‘{utm.easting}’ outside MGRS 100km grid squares')
    e100k = columns[col - 1]

    # rows in odd zones are A-V, in even zones F-E
    row = math.floor(utm.northing / 100e3) % 20
    n100k = MGRS_N100K_LETTERS[(utm.zone - 1) % 2][row]

    easting = round_half_up(utm.easting % 100e3, 6)
    northing = round_half_up(utm.northing % 100e3, 6)

    return Mgrs(utm.zone, band, e100k, n100k, easting, northing, utm.datum)


class Mgrs:
    """
    An MGRS grid reference.

    Args:
        zone:
            The 6° longitudinal zone, 1..60

        band:
            The 8° latitudinal band, C..X (omitting I and O)

        e100k:
            First letter (easting) of the 100km grid square

        n100k:
            Second letter (northing) of the 100km grid square

        easting:
            Easting in meters within the 100km grid square

        northing:
            Northing in meters within the 100km grid square

        datum:
            (Default WGS84) The datum the grid is referenced to
    """

    def __init__(
        self,
        zone: Union[int, str],
        band: str,
        e100k: str,
        n100k: str,
        easting: Union[float, str],
        northing: Union[float, str],
        datum: Union[Datum, str] = datums.WGS84,
    ):
        errors: List[InvalidMgrsField] = []

        try:
            zone = coerce_int(zone, 'MGRS zone', InvalidMgrsField)
            if not 1 <= zone <= 60:
                raise InvalidMgrsField(f'invalid MGRS zone ‘{zone}’')
        except InvalidMgrsField as err:
            errors.append(err)
            zone = None

        if not isinstance(band, str) or len(band) != 1 or band not in _BANDS:
            errors.append(InvalidBand(f'invalid MGRS band ‘{band}’'))

        if zone is not None and (
            not isinstance(e100k, str) or len(e100k) != 1 or
            e100k not in MGRS_E100K_LETTERS[(zone - 1) % 3]
        ):
            errors.append(InvalidGridSquare(
                f'invalid MGRS 100km grid square column ‘{e100k}’ for zone {zone}'
            ))

        if not isinstance(n100k, str) or len(n100k) != 1 or n100k not in MGRS_N100K_LETTERS[0]:
            errors.append(InvalidGridSquare(f'invalid MGRS 100km grid square row ‘{n100k}’'))

        try:
            easting = coerce_float(easting, 'MGRS easting', InvalidMgrsField)
            if not 0 <= easting < 100e3:
                raise InvalidMgrsField(f'invalid MGRS easting ‘{easting}’')
        except InvalidMgrsField as err:
            errors.append(err)

        try:
            northing = coerce_float(northing, 'MGRS northing', InvalidMgrsField)
            if not 0 <= northing < 100e3:
                raise InvalidMgrsField(f'invalid MGRS northing ‘{northing}’')
        except InvalidMgrsField as err:
            errors.append(err)

        if len(errors) == 1:
            raise errors[0]

        if errors:
            raise InvalidMgrsField(', '.join(str(err) for err in errors))

        self._zone = zone
        self._band = band
        self._e100k = e100k
        self._n100k = n100k
        self._easting = easting
        self._northing = northing
        self._datum = datums.get_datum(datum)

    def __eq__(self, other):
        if not isinstance(other, Mgrs):
            return False

        return (
            self.zone == other.zone and
            self.band == other.band and
            self.e100k == other.e100k and
            self.n100k == other.n100k and
            self.easting == other.easting and
            self.northing == other.northing and
            self.datum == other.datum
        )

    def __hash__(self):
        return hash((
            self.zone, self.band, self.e100k, self.n100k,
            self.easting, self.northing, self.datum.name
        ))

    def __repr__(self):
        return f'<Mgrs({self.to_str()}, {self.datum.name})>'

    def __str__(self):
        return self.to_str()

    @property
    def zone(self) -> int:
        return self._zone

    @property
    def band(self) -> str:
        return self._band

    @property
    def e100k(self) -> str:
        return self._e100k

    @property
    def n100k(self) -> str:
        return self._n100k

    @property
    def easting(self) -> float:
        return self._easting

    @property
    def northing(self) -> float:
        return self._northing

    @property
    def datum(self) -> Datum:
        return self._datum

    @classmethod
    def parse(cls, mgrs_str: str, datum: Union[Datum, str] = datums.WGS84) -> Mgrs:
        """
        Creates an Mgrs from a grid reference string, in either the separated
        form ('31U DQ 48251 11932') or the military form ('31UDQ4825111932').

        Eastings and northings of fewer than 5 digits are taken as the leading
        digits of a 5-digit value, so '4Q FJ 1 6' is 10000m east, 60000m north
        within square FJ.

        Args:
            mgrs_str:
                The grid reference

            datum:
                (Default WGS84) The datum the grid is referenced to

        Returns:
            Mgrs
        """
        if not isinstance(mgrs_str, str) or not mgrs_str.strip():
            raise InvalidMgrsField(f'invalid MGRS grid reference ‘{mgrs_str}’')

        ref = mgrs_str.strip().upper()
        parts = ref.split()

        if len(parts) == 1:
            match = _RE_MILITARY.match(ref)
            if not match or len(match.group(4)) % 2 or len(match.group(4)) > 10:
                raise InvalidMgrsField(f'invalid MGRS grid reference ‘{mgrs_str}’')

            zone, band, square, digits = match.groups()
            half = len(digits) // 2
            easting, northing = digits[:half], digits[half:]

        elif len(parts) == 4:
            grid_zone, square, easting, northing = parts
            match = _RE_GRID_ZONE.match(grid_zone)
            if not match or len(square) != 2:
                raise InvalidMgrsField(f'invalid MGRS grid reference ‘{mgrs_str}’')

            zone, band = match.groups()

        else:
            raise InvalidMgrsField(f'invalid MGRS grid reference ‘{mgrs_str}’')

        # standardise to 5-digit (meter) easting/northing
        easting, northing = (
            value.ljust(5, '0') if value.isdigit() or not value else value
            for value in (easting, northing)
        )

        return cls(zone, band, square[0], square[1], easting, northing, datum)

    def to_utm(self) -> Utm:
        """
        Converts this grid reference to a UTM coordinate.

        Grid references identify the square containing a point, so any fraction of
        a meter in the easting/northing is discarded rather than rounded.

        Returns:
            Utm
        """
        hemisphere = 'N' if self.band >= 'N' else 'S'

        col = MGRS_E100K_LETTERS[(self.zone - 1) % 3].index(self.e100k) + 1
        e100k_num = col * 100e3

        row = MGRS_N100K_LETTERS[(self.zone - 1) % 2].index(self.n100k)
        n100k_num = row * 100e3

        easting, northing = math.floor(self.easting), math.floor(self.northing)
        if (easting, northing) != (self.easting, self.northing):
            warn_once(
                'MGRS easting/northing truncated to whole meters on conversion to UTM '
                '(this warning will not repeat)'
            )

        # northing of the bottom of the band, on the central meridian
        band_lat = (_BANDS.index(self.band) - 10) * 8
        lon0 = central_meridian(self.zone)
        n_band = transverse_mercator.forward(
            band_lat, lon0, lon0, self.datum.ellipsoid, UTM_SCALE_FACTOR
        ).y
        if n_band < 0:
            n_band += UTM_FALSE_NORTHING

        # 100km row letters repeat every 2,000km north; add enough 2,000km blocks to get
        # into the band, allowing for the bottom-most 100km square
        n2m = 0.
        while n2m + n100k_num + northing < n_band - 100e3:
            n2m += 2000e3

        return Utm(
            self.zone, hemisphere, e100k_num + easting, n2m + n100k_num + northing, self.datum
        )

    def to_str(self, digits: int = 10) -> str:
        """
        Formats the grid reference, e.g. '31U DQ 48251 11932'.

        Args:
            digits:
                (Default 10) Total digits of easting + northing; one of 2 (10km
                precision), 4 (1km), 6 (100m), 8 (10m) or 10 (1m). Values are
                truncated, not rounded, to the requested precision.

        Returns:
            str
        """
        digits = coerce_int(digits, 'MGRS precision', InvalidPrecision)
        if digits not in MGRS_PRECISIONS:
            raise InvalidPrecision(f'invalid MGRS precision ‘{digits}’')

        half = digits // 2
        easting = math.floor(self.easting / 10 ** (5 - half))
        northing = math.floor(self.northing / 10 ** (5 - half))

        return (
            f'{self.zone:02d}{self.band} {self.e100k}{self.n100k} '
            f'{easting:0{half}d} {northing:0{half}d}'
        )
