"""
Universal Transverse Mercator (UTM) grid coordinates, and conversion to and from
latitude/longitude
"""

from __future__ import annotations

__all__ = ['Utm', 'central_meridian', 'latitude_band', 'latlon_to_utm', 'utm_zone']

import math
from typing import Optional, TYPE_CHECKING, Union

from pydantic import NonNegativeInt, validate_call

from geodetics._const import (
    MGRS_LATITUDE_BANDS, UTM_FALSE_EASTING, UTM_FALSE_NORTHING, UTM_MAX_EASTING,
    UTM_MAX_LATITUDE, UTM_MAX_NORTHING_NORTH, UTM_MIN_LATITUDE, UTM_MIN_NORTHING_SOUTH,
    UTM_SCALE_FACTOR
)
from geodetics import datums, transverse_mercator
from geodetics.datums import Datum
from geodetics.exceptions import InvalidUtmField, OutsideUtmLimits
from geodetics.latlon import LatLon
from geodetics.utils.functions import coerce_float, coerce_int, coerce_str, round_half_up
from geodetics.utils.logging import warn_once

if TYPE_CHECKING:  # pragma: no cover
    from geodetics.mgrs import Mgrs


def central_meridian(zone: int) -> float:
    """Longitude (degrees) of the central meridian of a UTM zone"""
    return (zone - 1) * 6 - 180 + 3


def latitude_band(lat: float) -> str:
    """The 8° MGRS latitude band letter containing a latitude (80S..84N)"""
    idx = math.floor(lat / 8 + 10)
    if not 0 <= idx < len(MGRS_LATITUDE_BANDS):
        raise OutsideUtmLimits(f'latitude ‘{lat}’ outside UTM limits')

    return MGRS_LATITUDE_BANDS[idx]


def utm_zone(lat: float, lon: float) -> int:
    """
    The UTM zone containing a point, including the Norway and Svalbard
    exceptions to the regular 6° zones.

    Args:
        lat:
            Latitude (degrees), within the UTM limits

        lon:
            Longitude (degrees)

    Returns:
        The zone, 1..60
    """
    if lon == 180:
        lon = -180.

    zone = math.floor((lon + 180) / 6) + 1
    band = latitude_band(lat)

    # Norway: zone 32 widened to cover the southwest coast
    if zone == 31 and band == 'V' and lon >= 3:
        return 32

    # Svalbard: zones 31, 33, 35 and 37 widened to cover zones 32, 34 and 36
    if band == 'X' and zone in (32, 34, 36):
        return zone - 1 if lon < central_meridian(zone) else zone + 1

    return zone


def latlon_to_utm(point: LatLon, zone: Optional[int] = None) -> Utm:
    """
    Converts a latitude/longitude to a UTM coordinate, on the point's datum.

    Args:
        point:
            The point to be converted; must lie between 80°S and 84°N

        zone:
            (Optional) Forces the coordinate into this zone instead of the zone
            containing the point. Coordinates in a forced zone are not subject to
            the usual easting/northing range checks.

    Returns:
        Utm, including the meridian convergence and grid scale factor at the point
    """
    if not UTM_MIN_LATITUDE <= point.lat <= UTM_MAX_LATITUDE:
        raise OutsideUtmLimits(f'latitude ‘{point.lat}’ outside UTM limits')

    lon = -180. if point.lon == 180 else point.lon

    if zone is None:
        zone = utm_zone(point.lat, lon)
        forced = False
    else:
        zone = coerce_int(zone, 'UTM zone', InvalidUtmField)
        if not 1 <= zone <= 60:
            raise InvalidUtmField(f'invalid UTM zone ‘{zone}’')
        forced = True
        warn_once(
            'UTM coordinates in a forced zone are not range-checked '
            '(this warning will not repeat)'
        )

    projected = transverse_mercator.forward(
        point.lat, lon, central_meridian(zone), point.datum.ellipsoid, UTM_SCALE_FACTOR
    )

    easting = projected.x + UTM_FALSE_EASTING
    northing = projected.y
    if northing < 0:
        northing += UTM_FALSE_NORTHING

    return Utm(
        zone,
        'N' if point.lat >= 0 else 'S',
        round_half_up(easting, 9),
        round_half_up(northing, 9),
        point.datum,
        convergence=round_half_up(projected.convergence, 9),
        scale=round_half_up(projected.scale, 12),
        verify_en=not forced,
    )


class Utm:
    """
    A UTM coordinate.

    Args:
        zone:
            The 6° longitudinal zone, 1..60

        hemisphere:
            'N' or 'S' (case-insensitive)

        easting:
            Easting in meters from the false easting (500km west of the central meridian)

        northing:
            Northing in meters from the equator (northern hemisphere) or from the
            false northing 10,000km south of the equator (southern hemisphere)

        datum:
            (Default WGS84) The datum the grid is referenced to

        convergence:
            (Optional) Meridian convergence in degrees; bearing of grid north
            clockwise from true north

        scale:
            (Optional) Grid scale factor

        verify_en:
            (Default True) Range-check the easting and northing; values outside the
            regular zone extents are only expected in forced zones
    """

    def __init__(
        self,
        zone: Union[int, str],
        hemisphere: str,
        easting: Union[float, str],
        northing: Union[float, str],
        datum: Union[Datum, str] = datums.WGS84,
        convergence: Optional[float] = None,
        scale: Optional[float] = None,
        verify_en: bool = True,
    ):
        zone = coerce_int(zone, 'UTM zone', InvalidUtmField)
        if not 1 <= zone <= 60:
            raise InvalidUtmField(f'invalid UTM zone ‘{zone}’')

        hemisphere = coerce_str(hemisphere, 'UTM hemisphere', InvalidUtmField).upper()
        if hemisphere not in ('N', 'S'):
            raise InvalidUtmField(f'invalid UTM hemisphere ‘{hemisphere}’')

        easting = coerce_float(easting, 'UTM easting', InvalidUtmField)
        northing = coerce_float(northing, 'UTM northing', InvalidUtmField)

        if verify_en:
            if not 0 <= easting <= UTM_MAX_EASTING:
                raise InvalidUtmField(f'invalid UTM easting ‘{easting}’')
            if hemisphere == 'N' and not 0 <= northing < UTM_MAX_NORTHING_NORTH:
                raise InvalidUtmField(f'invalid UTM northing ‘{northing}’')
            if hemisphere == 'S' and not UTM_MIN_NORTHING_SOUTH < northing <= UTM_FALSE_NORTHING:
                raise InvalidUtmField(f'invalid UTM northing ‘{northing}’')

        self._zone = zone
        self._hemisphere = hemisphere
        self._easting = easting
        self._northing = northing
        self._datum = datums.get_datum(datum)
        self._convergence = convergence
        self._scale = scale

    def __eq__(self, other):
        if not isinstance(other, Utm):
            return False

        return (
            self.zone == other.zone and
            self.hemisphere == other.hemisphere and
            self.easting == other.easting and
            self.northing == other.northing and
            self.datum == other.datum
        )

    def __hash__(self):
        return hash((self.zone, self.hemisphere, self.easting, self.northing, self.datum.name))

    def __repr__(self):
        return (
            f'<Utm({self.zone}, {self.hemisphere}, {self.easting}, {self.northing}, '
            f'{self.datum.name})>'
        )

    def __str__(self):
        return self.to_str()

    @property
    def zone(self) -> int:
        return self._zone

    @property
    def hemisphere(self) -> str:
        return self._hemisphere

    @property
    def easting(self) -> float:
        return self._easting

    @property
    def northing(self) -> float:
        return self._northing

    @property
    def datum(self) -> Datum:
        return self._datum

    @property
    def convergence(self) -> Optional[float]:
        return self._convergence

    @property
    def scale(self) -> Optional[float]:
        return self._scale

    @classmethod
    def parse(cls, utm_str: str, datum: Union[Datum, str] = datums.WGS84) -> Utm:
        """
        Creates a Utm from a string of whitespace-separated zone, hemisphere,
        easting and northing, e.g. '31 N 448251 5411932'.

        Args:
            utm_str:
                The UTM coordinate string

            datum:
                (Default WGS84) The datum the grid is referenced to

        Returns:
            Utm
        """
        if not isinstance(utm_str, str):
            raise InvalidUtmField(f'invalid UTM coordinate ‘{utm_str}’')

        parts = utm_str.split()
        if len(parts) != 4:
            raise InvalidUtmField(f'invalid UTM coordinate ‘{utm_str}’')

        zone, hemisphere, easting, northing = parts
        return cls(zone, hemisphere, easting, northing, datum)

    def to_latlon(self) -> LatLon:
        """
        Converts this coordinate to latitude/longitude on the same datum. The
        returned point carries the meridian convergence and grid scale factor.

        Returns:
            LatLon
        """
        x = self.easting - UTM_FALSE_EASTING
        y = self.northing - UTM_FALSE_NORTHING if self.hemisphere == 'S' else self.northing

        geographic = transverse_mercator.inverse(
            x, y, central_meridian(self.zone), self.datum.ellipsoid, UTM_SCALE_FACTOR
        )

        return LatLon(
            round_half_up(geographic.lat, 14),
            round_half_up(geographic.lon, 14),
            0.,
            self.datum,
            convergence=round_half_up(geographic.convergence, 9),
            scale=round_half_up(geographic.scale, 12),
        )

    def to_mgrs(self) -> Mgrs:
        """Converts this coordinate to an MGRS grid reference"""
        from geodetics.mgrs import utm_to_mgrs  # pylint: disable=import-outside-toplevel
        return utm_to_mgrs(self)

    @validate_call
    def to_str(self, digits: NonNegativeInt = 0) -> str:
        """
        Formats the coordinate as '<zone> <hemisphere> <easting> <northing>',
        e.g. '31 N 448251 5411932'.

        Args:
            digits:
                (Default 0) Decimal places for the easting and northing

        Returns:
            str
        """
        return (
            f'{self.zone:02d} {self.hemisphere} '
            f'{self.easting:.{digits}f} {self.northing:.{digits}f}'
        )
