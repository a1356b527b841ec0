"""
Representation of a geodetic point (latitude/longitude/height) on a datum
"""

from __future__ import annotations

__all__ = ['LatLon']

import math
from typing import Any, Mapping, Optional, Tuple, TYPE_CHECKING, Union

from typing_extensions import Self

from geodetics import datums, dms
from geodetics.cartesian import Cartesian, geodetic_to_cartesian
from geodetics.datums import Datum
from geodetics.exceptions import InvalidCoordinate
from geodetics.utils.functions import coerce_float

if TYPE_CHECKING:  # pragma: no cover
    from geodetics.utm import Utm

_LAT_KEYS = ('lat', 'latitude')
_LON_KEYS = ('lon', 'lng', 'longitude')


class LatLon:
    """
    A point on (or above) the earth, as geodetic latitude/longitude on a datum.

    Args:
        lat:
            Geodetic latitude in degrees, between -90 and 90

        lon:
            Longitude in degrees; wrapped to (-180, 180]

        height:
            (Default 0) Height above the ellipsoid, in meters

        datum:
            (Default WGS84) One of the registered datums, or its name

        convergence:
            (Optional) Meridian convergence (degrees); populated when the point is
            projected back from UTM

        scale:
            (Optional) Grid scale factor; populated when the point is projected
            back from UTM
    """

    def __init__(
        self,
        lat: Union[float, int, str],
        lon: Union[float, int, str],
        height: Union[float, int, str] = 0.,
        datum: Union[Datum, str] = datums.WGS84,
        convergence: Optional[float] = None,
        scale: Optional[float] = None,
    ):
        lat = coerce_float(lat, 'latitude')
        lon = coerce_float(lon, 'longitude')
        if not -90 <= lat <= 90:
            raise InvalidCoordinate(f'invalid latitude ‘{lat}’')

        lon = dms.wrap180(lon)
        if lon == -180:
            lon = 180.

        self._lat = lat
        self._lon = lon
        self._height = coerce_float(height, 'height')
        self._datum = datums.get_datum(datum)
        self._convergence = convergence
        self._scale = scale

    def __eq__(self, other):
        if not isinstance(other, LatLon):
            return False

        return (
            self.lat == other.lat and
            self.lon == other.lon and
            self.height == other.height and
            self.datum == other.datum
        )

    def __hash__(self):
        return hash((self.lat, self.lon, self.height, self.datum.name))

    def __repr__(self):
        return f'<LatLon({self.lat}, {self.lon}, {self.height}, {self.datum.name})>'

    def __str__(self):
        return self.to_str()

    @property
    def lat(self) -> float:
        return self._lat

    @property
    def lon(self) -> float:
        return self._lon

    @property
    def height(self) -> float:
        return self._height

    latitude = lat
    longitude = lon
    lng = lon

    @property
    def datum(self) -> Datum:
        return self._datum

    @datum.setter
    def datum(self, datum: Union[Datum, str]):
        self._datum = datums.get_datum(datum)

    @property
    def convergence(self) -> Optional[float]:
        return self._convergence

    @property
    def scale(self) -> Optional[float]:
        return self._scale

    @classmethod
    def parse(
        cls,
        *args: Any,
        height: Optional[float] = None,
        datum: Union[Datum, str] = datums.WGS84
    ) -> LatLon:
        """
        Creates a LatLon from a variety of representations:

            LatLon.parse(51.47788, -0.00147)
            LatLon.parse('51°28′40″N', '000°00′05″W', 17)
            LatLon.parse('51.47788, -0.00147')
            LatLon.parse({'lat': 51.47788, 'lng': -0.00147})
            LatLon.parse({'type': 'Point', 'coordinates': [-0.00147, 51.47788]})

        Objects exposing lat/lon (or latitude/longitude) attributes are also
        accepted. Latitude and longitude may be numbers, numeric strings or
        deg/min/sec strings.

        Args:
            args:
                The point, in one of the above forms

            height:
                (Optional) Height in meters; overrides any height in the input

            datum:
                (Default WGS84) The datum of the point

        Returns:
            LatLon
        """
        lat, lon, parsed_height = _parse_args(args)

        lat, lon = dms.parse(lat), dms.parse(lon)
        if math.isnan(lat) or math.isnan(lon):
            raise InvalidCoordinate(f'invalid point ‘{", ".join(map(str, args))}’')

        if height is None:
            height = 0. if parsed_height is None else parsed_height

        return cls(lat, lon, height, datum)

    def with_datum(self, datum: Union[Datum, str]) -> Self:
        """
        Returns a copy of this point tagged with a different datum. The latitude
        and longitude are NOT converted; use convert_datum() for that.
        """
        return type(self)(self.lat, self.lon, self.height, datum)

    def convert_datum(self, to_datum: Union[Datum, str]) -> LatLon:
        """
        Converts this point to another datum, via geocentric cartesian coordinates
        and Helmert transforms.

        Args:
            to_datum:
                The target datum (or its registry name)

        Returns:
            LatLon, on the target datum
        """
        to_datum = datums.get_datum(to_datum)
        if to_datum == self.datum:
            return self

        return self.to_cartesian().convert_datum(to_datum).to_latlon()

    def to_cartesian(self) -> Cartesian:
        """Converts this point to geocentric cartesian coordinates, on this point's datum"""
        x, y, z = geodetic_to_cartesian(self.lat, self.lon, self.height, self.datum.ellipsoid)
        return Cartesian(x, y, z, self.datum)

    def to_str(
        self,
        fmt: str = 'd',
        dp: Optional[int] = None,
        dp_height: Optional[int] = None
    ) -> str:
        """
        Formats the point as a string, e.g. '51.4779°N, 000.0015°W'.

        Args:
            fmt:
                (Default 'd') One of 'd', 'dm', 'dms' (deg/min/sec) or 'n' (signed
                numeric degrees)

            dp:
                (Optional) Decimal places; defaults to 4 for 'd' and 'n', 2 for
                'dm' and 0 for 'dms'

            dp_height:
                (Optional) If supplied, the height is appended to this many
                decimal places

        Returns:
            str
        """
        height = ''
        if dp_height is not None:
            height = f' {self.height:+.{dp_height}f}m'

        if fmt == 'n':
            dp = 4 if dp is None else dp
            return f'{self.lat:.{dp}f}, {self.lon:.{dp}f}{height}'

        if fmt not in ('d', 'dm', 'dms'):
            raise ValueError(f'invalid format ‘{fmt}’')

        return f'{dms.to_lat(self.lat, fmt, dp)}, {dms.to_lon(self.lon, fmt, dp)}{height}'

    def to_utm(self, zone: Optional[int] = None) -> Utm:
        """
        Converts this point to a UTM coordinate.

        Args:
            zone:
                (Optional) Forces the coordinate into this UTM zone

        Returns:
            Utm
        """
        from geodetics.utm import latlon_to_utm  # pylint: disable=import-outside-toplevel
        return latlon_to_utm(self, zone)

    def distance_to(self, point: LatLon) -> float:
        """Distance to a point along the ellipsoid (meters, to 1mm); NaN if unresolvable"""
        from geodetics.geodesic import distance_to  # pylint: disable=import-outside-toplevel
        return distance_to(self, point)

    def initial_bearing_to(self, point: LatLon) -> float:
        """Initial bearing to a point, in degrees from north; NaN if unresolvable"""
        from geodetics.geodesic import initial_bearing_to  # pylint: disable=import-outside-toplevel
        return initial_bearing_to(self, point)

    def final_bearing_to(self, point: LatLon) -> float:
        """Bearing on arrival at a point, in degrees from north; NaN if unresolvable"""
        from geodetics.geodesic import final_bearing_to  # pylint: disable=import-outside-toplevel
        return final_bearing_to(self, point)

    def destination_point(self, distance: float, initial_bearing: float) -> LatLon:
        """The point reached after travelling a distance on an initial bearing"""
        from geodetics.geodesic import destination_point  # pylint: disable=import-outside-toplevel
        return destination_point(self, distance, initial_bearing)

    def final_bearing_on(self, distance: float, initial_bearing: float) -> float:
        """The bearing on arrival after travelling a distance on an initial bearing"""
        from geodetics.geodesic import final_bearing_on  # pylint: disable=import-outside-toplevel
        return final_bearing_on(self, distance, initial_bearing)

    def intermediate_point_to(self, point: LatLon, fraction: float) -> LatLon:
        """The point at a given fraction of the way along the geodesic to a point"""
        from geodetics.geodesic import intermediate_point_to  # pylint: disable=import-outside-toplevel
        return intermediate_point_to(self, point, fraction)


def _first_present(obj: Any, keys: Tuple[str, ...], getter) -> Any:
    for key in keys:
        value = getter(obj, key)
        if value is not None:
            return value
    return None


def _parse_args(args: Tuple[Any, ...]) -> Tuple[Any, Any, Optional[float]]:
    """Pulls (lat, lon, height) out of the argument forms accepted by LatLon.parse"""
    if len(args) in (2, 3):
        lat, lon = args[:2]
        return lat, lon, args[2] if len(args) == 3 else None

    if len(args) != 1:
        raise InvalidCoordinate(f'invalid point ‘{", ".join(map(str, args))}’')

    obj = args[0]
    if isinstance(obj, str):
        parts = [part.strip() for part in obj.split(',')]
        if len(parts) not in (2, 3):
            raise InvalidCoordinate(f'invalid point ‘{obj}’')
        return parts[0], parts[1], parts[2] if len(parts) == 3 else None

    if isinstance(obj, Mapping):
        if obj.get('type') == 'Point' and isinstance(obj.get('coordinates'), (list, tuple)):
            coords = obj['coordinates']
            if len(coords) not in (2, 3):
                raise InvalidCoordinate(f'invalid GeoJSON point ‘{obj}’')
            return coords[1], coords[0], coords[2] if len(coords) == 3 else None

        getter = lambda o, k: o.get(k)  # noqa: E731
    else:
        getter = lambda o, k: getattr(o, k, None)  # noqa: E731

    lat = _first_present(obj, _LAT_KEYS, getter)
    lon = _first_present(obj, _LON_KEYS, getter)
    if lat is None or lon is None:
        raise InvalidCoordinate(f'invalid point ‘{obj}’')

    return lat, lon, getter(obj, 'height')
