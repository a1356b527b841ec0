"""
Exceptions raised by geodetics
"""

__all__ = [
    'Antipodal', 'ConvergenceError', 'FailedToConverge', 'GeodeticError',
    'InvalidBand', 'InvalidCoordinate', 'InvalidGridSquare', 'InvalidMgrsField',
    'InvalidPrecision', 'InvalidUtmField', 'NotOnSurface', 'OutsideUtmLimits',
    'Singular', 'UnknownDatum',
]


class GeodeticError(Exception):
    """Base class for all geodetics errors"""


class InvalidCoordinate(GeodeticError, ValueError):
    """Malformed input to a point constructor or parser"""


class UnknownDatum(GeodeticError, ValueError):
    """Datum is missing or not one of the registered datums"""


class OutsideUtmLimits(GeodeticError, ValueError):
    """Latitude is outside the 80S..84N UTM band"""


class InvalidUtmField(InvalidCoordinate):
    """A UTM zone, hemisphere, easting or northing failed validation"""


class InvalidMgrsField(InvalidCoordinate):
    """An MGRS zone, easting, northing or textual form failed validation"""


class InvalidBand(InvalidMgrsField):
    """MGRS latitude band letter is not one of C..X (excluding I and O)"""


class InvalidGridSquare(InvalidMgrsField):
    """MGRS 100km square letter is invalid, or invalid for the grid zone"""


class InvalidPrecision(InvalidMgrsField):
    """MGRS output precision is not one of 2, 4, 6, 8, 10 digits"""


class NotOnSurface(GeodeticError, ValueError):
    """Ellipsoidal geodesics require points on the ellipsoid surface (height 0)"""


class ConvergenceError(GeodeticError, ArithmeticError):
    """An iterative solution did not settle"""


class Antipodal(ConvergenceError):
    """Vincenty inverse diverged for (near-)antipodal points"""


class FailedToConverge(ConvergenceError):
    """An iterative solution hit its iteration limit"""


class Singular(GeodeticError, ArithmeticError):
    """Cartesian point at the centre of the earth has no geodetic equivalent"""
