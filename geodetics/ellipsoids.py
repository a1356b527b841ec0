"""
Reference ellipsoids, as used by the registered datums
"""

__all__ = [
    'ELLIPSOIDS', 'Ellipsoid', 'AIRY1830', 'AIRY_MODIFIED', 'BESSEL1841', 'CLARKE1866',
    'CLARKE1880IGN', 'GRS80', 'INTL1924', 'WGS72', 'WGS84', 'get_ellipsoid',
]

from types import MappingProxyType
from typing import NamedTuple

from geodetics._const import WGS84_A, WGS84_B, WGS84_F


class Ellipsoid(NamedTuple):
    """
    An oblate ellipsoid of revolution.

    Args:
        name:
            The registry name of the ellipsoid, e.g. 'WGS84'

        a:
            Semi-major axis (meters)

        b:
            Semi-minor axis (meters)

        f:
            Flattening
    """
    name: str
    a: float
    b: float
    f: float

    def __repr__(self):
        return f'<Ellipsoid({self.name})>'

    @property
    def eccentricity_sq(self) -> float:
        """First eccentricity squared, e² = 2f − f²"""
        return 2 * self.f - self.f * self.f

    @property
    def third_flattening(self) -> float:
        """n = f / (2 − f)"""
        return self.f / (2 - self.f)


WGS84 = Ellipsoid('WGS84', WGS84_A, WGS84_B, WGS84_F)
AIRY1830 = Ellipsoid('Airy1830', 6377563.396, 6356256.909, 1 / 299.3249646)
AIRY_MODIFIED = Ellipsoid('AiryModified', 6377340.189, 6356034.448, 1 / 299.3249646)
BESSEL1841 = Ellipsoid('Bessel1841', 6377397.155, 6356078.962822, 1 / 299.15281285)
CLARKE1866 = Ellipsoid('Clarke1866', 6378206.4, 6356583.8, 1 / 294.978698214)
CLARKE1880IGN = Ellipsoid('Clarke1880IGN', 6378249.2, 6356515.0, 1 / 293.466021294)
GRS80 = Ellipsoid('GRS80', 6378137, 6356752.314140, 1 / 298.257222101)
INTL1924 = Ellipsoid('Intl1924', 6378388, 6356911.946128, 1 / 297)
WGS72 = Ellipsoid('WGS72', 6378135, 6356750.52, 1 / 298.26)

ELLIPSOIDS = MappingProxyType({
    ellipsoid.name: ellipsoid
    for ellipsoid in (
        WGS84, AIRY1830, AIRY_MODIFIED, BESSEL1841, CLARKE1866,
        CLARKE1880IGN, GRS80, INTL1924, WGS72,
    )
})


def get_ellipsoid(name: str) -> Ellipsoid:
    """Look up a registered ellipsoid by name, e.g. 'Airy1830'"""
    try:
        return ELLIPSOIDS[name]
    except KeyError as err:
        raise KeyError(f'unrecognised ellipsoid ‘{name}’') from err
