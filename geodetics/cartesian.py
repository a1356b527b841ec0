"""
Earth-centred earth-fixed (ECEF) cartesian coordinates, and conversion to and
from geodetic latitude/longitude/height
"""

from __future__ import annotations

__all__ = ['Cartesian', 'cartesian_to_geodetic', 'geodetic_to_cartesian']

import math
from typing import Optional, Tuple, TYPE_CHECKING, Union

import numpy as np

from geodetics._const import CARTESIAN_EPSILON, CARTESIAN_MAX_ITERATIONS
from geodetics import datums
from geodetics.datums import Datum, HelmertTransform
from geodetics.ellipsoids import Ellipsoid
from geodetics.exceptions import Singular, UnknownDatum
from geodetics.utils.functions import coerce_float

if TYPE_CHECKING:  # pragma: no cover
    from geodetics.latlon import LatLon


def geodetic_to_cartesian(
    lat: float,
    lon: float,
    height: float,
    ellipsoid: Ellipsoid
) -> Tuple[float, float, float]:
    """
    Converts geodetic coordinates to geocentric cartesian coordinates.

    Args:
        lat:
            Geodetic latitude (degrees)

        lon:
            Longitude (degrees)

        height:
            Height above the ellipsoid (meters)

        ellipsoid:
            The ellipsoid the latitude/longitude are referenced to

    Returns:
        (x, y, z) in meters
    """
    phi, lam = math.radians(lat), math.radians(lon)
    sin_phi, cos_phi = math.sin(phi), math.cos(phi)
    e_sq = ellipsoid.eccentricity_sq

    # radius of curvature in prime vertical
    nu = ellipsoid.a / math.sqrt(1 - e_sq * sin_phi * sin_phi)

    return (
        (nu + height) * cos_phi * math.cos(lam),
        (nu + height) * cos_phi * math.sin(lam),
        (nu * (1 - e_sq) + height) * sin_phi,
    )


def cartesian_to_geodetic(
    x: float,
    y: float,
    z: float,
    ellipsoid: Ellipsoid
) -> Tuple[float, float, float]:
    """
    Converts geocentric cartesian coordinates to geodetic coordinates, by
    iterating on the parametric latitude until it settles to within 1e-12 rad
    (at most 10 iterations; typically 2-3).

    Points within a meter of the polar axis are treated as being at the pole,
    with a longitude of 0.

    Args:
        x, y, z:
            Cartesian coordinates (meters)

        ellipsoid:
            The ellipsoid to reference the result to

    Returns:
        (latitude, longitude, height) in degrees, degrees, meters
    """
    if x == 0 and y == 0 and z == 0:
        raise Singular('cannot convert the centre of the earth to geodetic coordinates')

    a, b = ellipsoid.a, ellipsoid.b
    e_sq = ellipsoid.eccentricity_sq
    p = math.hypot(x, y)

    if p < 1:
        return math.copysign(90., z), 0., abs(z) - b

    phi = math.atan2(z, p * (1 - e_sq))
    for _ in range(CARTESIAN_MAX_ITERATIONS):
        sin_phi = math.sin(phi)
        nu = a / math.sqrt(1 - e_sq * sin_phi * sin_phi)
        phi_prev, phi = phi, math.atan2(z + e_sq * nu * sin_phi, p)
        if abs(phi - phi_prev) < CARTESIAN_EPSILON:
            break

    sin_phi = math.sin(phi)
    nu = a / math.sqrt(1 - e_sq * sin_phi * sin_phi)
    height = p / math.cos(phi) - nu

    return math.degrees(phi), math.degrees(math.atan2(y, x)), height


class Cartesian:
    """
    A geocentric (ECEF) cartesian point, in meters: x toward the intersection of
    the equator and prime meridian, y toward 90°E, z toward the north pole.

    The datum is optional; when present it determines the ellipsoid used to
    convert back to latitude/longitude, and is required for datum conversion.
    """

    def __init__(
        self,
        x: Union[float, str],
        y: Union[float, str],
        z: Union[float, str],
        datum: Optional[Datum] = None,
    ):
        self._x = coerce_float(x, 'x coordinate')
        self._y = coerce_float(y, 'y coordinate')
        self._z = coerce_float(z, 'z coordinate')
        self._datum = None if datum is None else datums.get_datum(datum)

    def __eq__(self, other):
        if not isinstance(other, Cartesian):
            return False

        return (
            self.x == other.x and
            self.y == other.y and
            self.z == other.z and
            self.datum == other.datum
        )

    def __hash__(self):
        return hash((self.x, self.y, self.z, self.datum))

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __repr__(self):
        datum = f', {self.datum.name}' if self.datum else ''
        return f'<Cartesian({self.x}, {self.y}, {self.z}{datum})>'

    def __str__(self):
        return self.to_str()

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def datum(self) -> Optional[Datum]:
        return self._datum

    @classmethod
    def from_array(cls, xyz: np.ndarray, datum: Optional[Datum] = None) -> Cartesian:
        x, y, z = np.asarray(xyz, dtype=float).tolist()
        return cls(x, y, z, datum)

    def apply_transform(self, transform: HelmertTransform) -> Cartesian:
        """
        Applies a Helmert transform to this point. The result carries no datum;
        use convert_datum() to convert between registered datums.

        Args:
            transform:
                The transform to be applied

        Returns:
            Cartesian
        """
        return Cartesian.from_array(transform.apply(self.to_array()))

    def convert_datum(self, to_datum: Datum) -> Cartesian:
        """
        Converts this point to another datum.

        Args:
            to_datum:
                The target datum (or its registry name)

        Returns:
            Cartesian, referenced to the target datum
        """
        if self.datum is None:
            raise UnknownDatum('cartesian coordinate has no datum')

        to_datum = datums.get_datum(to_datum)
        xyz = self.to_array()
        for transform in datums.transforms_between(self.datum, to_datum):
            xyz = transform.apply(xyz)

        return Cartesian.from_array(xyz, to_datum)

    def to_array(self) -> np.ndarray:
        """The point as a numpy [x, y, z] vector"""
        return np.array([self.x, self.y, self.z], dtype=float)

    def to_latlon(self) -> LatLon:
        """
        Converts this point to geodetic latitude/longitude/height, on this point's
        datum (WGS84 if the point has none).

        Returns:
            LatLon
        """
        from geodetics.latlon import LatLon  # pylint: disable=import-outside-toplevel

        datum = self.datum or datums.WGS84
        lat, lon, height = cartesian_to_geodetic(self.x, self.y, self.z, datum.ellipsoid)
        return LatLon(lat, lon, height, datum)

    def to_str(self, dp: int = 0) -> str:
        """
        Formats the point as '[x,y,z]'.

        Args:
            dp:
                (Default 0) Number of decimal places to use

        Returns:
            str
        """
        return f'[{self.x:.{dp}f},{self.y:.{dp}f},{self.z:.{dp}f}]'
