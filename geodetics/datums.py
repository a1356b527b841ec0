"""
Geodetic datums and the Helmert 7-parameter transforms relating them to WGS84
"""

__all__ = [
    'DATUMS', 'Datum', 'HelmertTransform', 'ED50', 'IRL1975', 'NAD27', 'NAD83', 'NTF',
    'OSGB36', 'POTSDAM', 'TOKYO_JAPAN', 'WGS72', 'WGS84', 'get_datum', 'is_registered',
    'transforms_between',
]

import math
from types import MappingProxyType
from typing import Any, NamedTuple, Sequence, Tuple

import numpy as np

from geodetics import ellipsoids
from geodetics.ellipsoids import Ellipsoid
from geodetics.exceptions import UnknownDatum


class HelmertTransform(NamedTuple):
    """
    A small-angle (Bursa-Wolf) similarity transform, taking WGS84 cartesian
    coordinates to a datum's cartesian coordinates.

    Args:
        tx, ty, tz:
            Translation (meters)

        s:
            Scale (parts per million)

        rx, ry, rz:
            Rotation (arcseconds)
    """
    tx: float
    ty: float
    tz: float
    s: float
    rx: float
    ry: float
    rz: float

    def __neg__(self) -> 'HelmertTransform':
        return HelmertTransform(*(-param for param in self))

    @property
    def translation(self) -> np.ndarray:
        return np.array([self.tx, self.ty, self.tz], dtype=float)

    @property
    def matrix(self) -> np.ndarray:
        """The combined scale/rotation matrix"""
        s1 = 1 + self.s / 1e6
        rx, ry, rz = (math.radians(r / 3600) for r in (self.rx, self.ry, self.rz))
        return np.array(
            [
                [s1, -rz, ry],
                [rz, s1, -rx],
                [-ry, rx, s1],
            ],
            dtype=float
        )

    def apply(self, xyz: Sequence[float]) -> np.ndarray:
        """
        Applies the transform to a cartesian [x, y, z] vector.

        Args:
            xyz:
                Cartesian coordinates (meters)

        Returns:
            numpy array of the transformed [x, y, z]
        """
        return self.translation + self.matrix @ np.asarray(xyz, dtype=float)


class Datum(NamedTuple):
    """A named datum; an ellipsoid plus its transform from WGS84"""
    name: str
    ellipsoid: Ellipsoid
    transform: HelmertTransform

    def __repr__(self):
        return f'<Datum({self.name})>'


ED50 = Datum(
    'ED50', ellipsoids.INTL1924,
    HelmertTransform(89.5, 93.8, 123.1, -1.2, 0.0, 0.0, 0.156)
)
IRL1975 = Datum(
    'Irl1975', ellipsoids.AIRY_MODIFIED,
    HelmertTransform(-482.530, 130.596, -564.557, -8.150, 1.042, 0.214, 0.631)
)
NAD27 = Datum(
    'NAD27', ellipsoids.CLARKE1866,
    HelmertTransform(8, -160, -176, 0, 0, 0, 0)
)
NAD83 = Datum(
    'NAD83', ellipsoids.GRS80,
    HelmertTransform(0.9956, -1.9103, -0.5215, -0.00062, 0.025915, 0.009426, 0.011599)
)
NTF = Datum(
    'NTF', ellipsoids.CLARKE1880IGN,
    HelmertTransform(168, 60, -320, 0, 0, 0, 0)
)
OSGB36 = Datum(
    'OSGB36', ellipsoids.AIRY1830,
    HelmertTransform(-446.448, 125.157, -542.060, 20.4894, -0.1502, -0.2470, -0.8421)
)
POTSDAM = Datum(
    'Potsdam', ellipsoids.BESSEL1841,
    HelmertTransform(-582, -105, -414, -8.3, 1.04, 0.35, -3.08)
)
TOKYO_JAPAN = Datum(
    'TokyoJapan', ellipsoids.BESSEL1841,
    HelmertTransform(148, -507, -685, 0, 0, 0, 0)
)
WGS72 = Datum(
    'WGS72', ellipsoids.WGS72,
    HelmertTransform(0, 0, -4.5, -0.22, 0, 0, 0.554)
)
WGS84 = Datum(
    'WGS84', ellipsoids.WGS84,
    HelmertTransform(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
)

DATUMS = MappingProxyType({
    datum.name: datum
    for datum in (
        ED50, IRL1975, NAD27, NAD83, NTF, OSGB36, POTSDAM, TOKYO_JAPAN, WGS72, WGS84
    )
})


def is_registered(datum: Any) -> bool:
    return isinstance(datum, Datum) and DATUMS.get(datum.name) == datum


def get_datum(datum: Any) -> Datum:
    """
    Resolves a datum, or a datum name, to one of the registered datums.

    Args:
        datum:
            A Datum, or the registry name of one (e.g. 'OSGB36')

    Returns:
        Datum
    """
    if isinstance(datum, str) and datum in DATUMS:
        return DATUMS[datum]

    if is_registered(datum):
        return datum

    raise UnknownDatum(f'unrecognised datum ‘{datum}’')


def transforms_between(from_datum: Datum, to_datum: Datum) -> Tuple[HelmertTransform, ...]:
    """
    The sequence of transforms taking cartesian coordinates on one datum to another.

    Transforms are only defined relative to WGS84, so a conversion between two
    non-WGS84 datums is made via WGS84 (two transforms). Converting a datum to
    itself requires no transform.

    Args:
        from_datum:
            The datum of the source coordinates

        to_datum:
            The target datum

    Returns:
        Tuple of HelmertTransforms, to be applied in order
    """
    from_datum, to_datum = get_datum(from_datum), get_datum(to_datum)

    if from_datum == to_datum:
        return ()

    if from_datum == WGS84:
        return (to_datum.transform, )

    if to_datum == WGS84:
        return (-from_datum.transform, )

    return -from_datum.transform, to_datum.transform
