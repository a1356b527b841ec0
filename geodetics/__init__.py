from geodetics._version import __version__  # noqa: F401
from geodetics.utils.logging import LOGGER
from geodetics.cartesian import Cartesian
from geodetics.datums import DATUMS, Datum, HelmertTransform
from geodetics.ellipsoids import ELLIPSOIDS, Ellipsoid
from geodetics.exceptions import (
    Antipodal, ConvergenceError, FailedToConverge, GeodeticError, InvalidBand,
    InvalidCoordinate, InvalidGridSquare, InvalidMgrsField, InvalidPrecision,
    InvalidUtmField, NotOnSurface, OutsideUtmLimits, Singular, UnknownDatum
)
from geodetics.latlon import LatLon
from geodetics.utm import Utm
from geodetics.mgrs import Mgrs


__all__ = [
    'Antipodal',
    'Cartesian',
    'ConvergenceError',
    'DATUMS',
    'Datum',
    'ELLIPSOIDS',
    'Ellipsoid',
    'FailedToConverge',
    'GeodeticError',
    'HelmertTransform',
    'InvalidBand',
    'InvalidCoordinate',
    'InvalidGridSquare',
    'InvalidMgrsField',
    'InvalidPrecision',
    'InvalidUtmField',
    'LatLon',
    'Mgrs',
    'NotOnSurface',
    'OutsideUtmLimits',
    'Singular',
    'UnknownDatum',
    'Utm',
    'LOGGER',
]
