"""
Geodesics on the ellipsoid, using Vincenty's direct and inverse solutions.

The direct and inverse functions return their full results (including the
number of iterations taken) and raise on failure to converge; the remaining
functions are the public conveniences, which round their results; the distance
and bearing functions report unresolvable (near-antipodal) cases as NaN.
"""

__all__ = [
    'DirectResult', 'InverseResult', 'destination_point', 'direct', 'distance_to',
    'final_bearing_on', 'final_bearing_to', 'initial_bearing_to', 'intermediate_point_to',
    'inverse',
]

import math
import sys
from typing import NamedTuple

from geodetics._const import (
    VINCENTY_COINCIDENT_SIN_SQ_SIGMA, VINCENTY_DIRECT_MAX_ITERATIONS, VINCENTY_EPSILON,
    VINCENTY_INVERSE_MAX_ITERATIONS
)
from geodetics.dms import wrap360
from geodetics.exceptions import (
    Antipodal, ConvergenceError, FailedToConverge, InvalidCoordinate, NotOnSurface
)
from geodetics.latlon import LatLon
from geodetics.utils.functions import coerce_float, round_half_up
from geodetics.utils.logging import LOGGER

_MACHINE_EPSILON = sys.float_info.epsilon


class DirectResult(NamedTuple):
    point: LatLon
    final_bearing: float
    iterations: int


class InverseResult(NamedTuple):
    distance: float
    initial_bearing: float
    final_bearing: float
    iterations: int


def _check_point(point: LatLon, name: str) -> None:
    if not isinstance(point, LatLon):
        raise InvalidCoordinate(f'invalid {name} ‘{point}’')

    if point.height != 0:
        raise NotOnSurface('point must be on the surface of the ellipsoid')


def _series_coefficients(u_sq: float):
    """Vincenty's A and B series in u²"""
    big_a = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    big_b = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    return big_a, big_b


def _delta_sigma(big_b: float, sin_sigma: float, cos_sigma: float, cos_2sigma_m: float) -> float:
    cos_sq_2sm = cos_2sigma_m * cos_2sigma_m
    return big_b * sin_sigma * (
        cos_2sigma_m + big_b / 4 * (
            cos_sigma * (-1 + 2 * cos_sq_2sm) -
            big_b / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma * sin_sigma) * (-3 + 4 * cos_sq_2sm)
        )
    )


def direct(start: LatLon, distance: float, initial_bearing: float) -> DirectResult:
    """
    Vincenty direct: the destination reached, and the bearing on arrival, after
    travelling a distance along a geodesic from a start point.

    Args:
        start:
            The start point; must be on the ellipsoid surface (height 0)

        distance:
            Distance along the geodesic (meters)

        initial_bearing:
            Initial bearing, in degrees from north

    Returns:
        DirectResult of (point, final_bearing, iterations); for a zero distance
        the start point is returned and the final bearing is NaN
    """
    _check_point(start, 'start point')
    s = coerce_float(distance, 'distance')
    bearing = coerce_float(initial_bearing, 'bearing')

    if s == 0:
        return DirectResult(start, math.nan, 0)

    ellipsoid = start.datum.ellipsoid
    a, b, f = ellipsoid.a, ellipsoid.b, ellipsoid.f

    phi1, lam1 = math.radians(start.lat), math.radians(start.lon)
    alpha1 = math.radians(bearing)
    sin_alpha1, cos_alpha1 = math.sin(alpha1), math.cos(alpha1)

    tan_u1 = (1 - f) * math.tan(phi1)
    cos_u1 = 1 / math.sqrt(1 + tan_u1 * tan_u1)
    sin_u1 = tan_u1 * cos_u1

    # angular distance on the sphere from the equator to the start point
    sigma1 = math.atan2(tan_u1, cos_alpha1)
    sin_alpha = cos_u1 * sin_alpha1
    cos_sq_alpha = 1 - sin_alpha * sin_alpha
    u_sq = cos_sq_alpha * (a * a - b * b) / (b * b)
    big_a, big_b = _series_coefficients(u_sq)

    sigma = s / (b * big_a)
    iterations = 0
    while True:
        cos_2sigma_m = math.cos(2 * sigma1 + sigma)
        delta_sigma = _delta_sigma(big_b, math.sin(sigma), math.cos(sigma), cos_2sigma_m)
        sigma_prev, sigma = sigma, s / (b * big_a) + delta_sigma
        iterations += 1
        if abs(sigma - sigma_prev) <= VINCENTY_EPSILON:
            break
        if iterations >= VINCENTY_DIRECT_MAX_ITERATIONS:
            raise FailedToConverge('Vincenty formula failed to converge')

    sin_sigma, cos_sigma = math.sin(sigma), math.cos(sigma)
    cos_2sigma_m = math.cos(2 * sigma1 + sigma)

    x = sin_u1 * sin_sigma - cos_u1 * cos_sigma * cos_alpha1
    phi2 = math.atan2(
        sin_u1 * cos_sigma + cos_u1 * sin_sigma * cos_alpha1,
        (1 - f) * math.sqrt(sin_alpha * sin_alpha + x * x)
    )
    lam = math.atan2(sin_sigma * sin_alpha1, cos_u1 * cos_sigma - sin_u1 * sin_sigma * cos_alpha1)
    c = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
    big_l = lam - (1 - c) * f * sin_alpha * (
        sigma + c * sin_sigma * (
            cos_2sigma_m + c * cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m)
        )
    )
    lam2 = lam1 + big_l

    alpha2 = math.atan2(sin_alpha, -x)

    return DirectResult(
        LatLon(math.degrees(phi2), math.degrees(lam2), 0., start.datum),
        wrap360(math.degrees(alpha2)),
        iterations,
    )


def inverse(point1: LatLon, point2: LatLon) -> InverseResult:
    """
    Vincenty inverse: the distance between two points along the geodesic joining
    them, and the initial and final bearings of that geodesic.

    The ellipsoid of the first point's datum is used. Nearly antipodal points
    may not resolve, in which case Antipodal (or FailedToConverge) is raised.

    Args:
        point1:
            The start point; must be on the ellipsoid surface (height 0)

        point2:
            The end point; must be on the ellipsoid surface (height 0)

    Returns:
        InverseResult of (distance, initial_bearing, final_bearing, iterations);
        bearings are NaN for coincident points
    """
    _check_point(point1, 'point')
    _check_point(point2, 'point')

    ellipsoid = point1.datum.ellipsoid
    a, b, f = ellipsoid.a, ellipsoid.b, ellipsoid.f

    phi1, lam1 = math.radians(point1.lat), math.radians(point1.lon)
    phi2, lam2 = math.radians(point2.lat), math.radians(point2.lon)

    big_l = lam2 - lam1
    tan_u1 = (1 - f) * math.tan(phi1)
    cos_u1 = 1 / math.sqrt(1 + tan_u1 * tan_u1)
    sin_u1 = tan_u1 * cos_u1
    tan_u2 = (1 - f) * math.tan(phi2)
    cos_u2 = 1 / math.sqrt(1 + tan_u2 * tan_u2)
    sin_u2 = tan_u2 * cos_u2

    antipodal = abs(big_l) > math.pi / 2 or abs(phi2 - phi1) > math.pi / 2

    lam = big_l
    sigma = math.pi if antipodal else 0.
    sin_sigma, cos_sigma = 0., -1. if antipodal else 1.
    sin_sq_sigma = 0.
    cos_2sigma_m = 1.
    cos_sq_alpha = 1.

    iterations = 0
    while True:
        sin_lam, cos_lam = math.sin(lam), math.cos(lam)
        sin_sq_sigma = (
            (cos_u2 * sin_lam) ** 2 +
            (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam) ** 2
        )
        if abs(sin_sq_sigma) < VINCENTY_COINCIDENT_SIN_SQ_SIGMA:
            # co-incident or antipodal points
            break

        sin_sigma = math.sqrt(sin_sq_sigma)
        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        sigma = math.atan2(sin_sigma, cos_sigma)
        sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
        cos_sq_alpha = 1 - sin_alpha * sin_alpha

        # on equatorial line cos²α = 0
        cos_2sigma_m = cos_sigma - 2 * sin_u1 * sin_u2 / cos_sq_alpha if cos_sq_alpha != 0 else 0.

        c = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
        lam_prev = lam
        lam = big_l + (1 - c) * f * sin_alpha * (
            sigma + c * sin_sigma * (
                cos_2sigma_m + c * cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m)
            )
        )
        iteration_check = abs(lam) - math.pi if antipodal else abs(lam)
        if iteration_check > math.pi:
            raise Antipodal('λ > π')

        iterations += 1
        if abs(lam - lam_prev) <= VINCENTY_EPSILON:
            break
        if iterations >= VINCENTY_INVERSE_MAX_ITERATIONS:
            raise FailedToConverge('Vincenty formula failed to converge')

    u_sq = cos_sq_alpha * (a * a - b * b) / (b * b)
    big_a, big_b = _series_coefficients(u_sq)
    delta_sigma = _delta_sigma(big_b, sin_sigma, cos_sigma, cos_2sigma_m)

    s = b * big_a * (sigma - delta_sigma)

    # azimuths are undefined for coincident and antipodal points
    if abs(sin_sq_sigma) < _MACHINE_EPSILON:
        alpha1, alpha2 = 0., math.pi
    else:
        alpha1 = math.atan2(cos_u2 * sin_lam, cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam)
        alpha2 = math.atan2(cos_u1 * sin_lam, -sin_u1 * cos_u2 + cos_u1 * sin_u2 * cos_lam)

    if abs(s) < _MACHINE_EPSILON:
        initial_bearing = final_bearing = math.nan
    else:
        initial_bearing = wrap360(math.degrees(alpha1))
        final_bearing = wrap360(math.degrees(alpha2))

    return InverseResult(s, initial_bearing, final_bearing, iterations)


def distance_to(point1: LatLon, point2: LatLon) -> float:
    """
    Distance between two points along the ellipsoid, to the nearest millimeter.

    Args:
        point1:
            The start point

        point2:
            The end point

    Returns:
        Distance in meters, or NaN if the points are too near antipodal to resolve
    """
    try:
        dist = inverse(point1, point2).distance
    except ConvergenceError as err:
        LOGGER.debug('distance unresolved (%s); returning NaN', err)
        return math.nan

    return round_half_up(dist, 3)


def initial_bearing_to(point1: LatLon, point2: LatLon) -> float:
    """Initial bearing (forward azimuth) from point1 to point2, to 1e-7°; NaN if unresolved"""
    try:
        brng = inverse(point1, point2).initial_bearing
    except ConvergenceError as err:
        LOGGER.debug('initial bearing unresolved (%s); returning NaN', err)
        return math.nan

    return round_half_up(brng, 7)


def final_bearing_to(point1: LatLon, point2: LatLon) -> float:
    """Final bearing (reverse azimuth) on arrival at point2, to 1e-7°; NaN if unresolved"""
    try:
        brng = inverse(point1, point2).final_bearing
    except ConvergenceError as err:
        LOGGER.debug('final bearing unresolved (%s); returning NaN', err)
        return math.nan

    return round_half_up(brng, 7)


def destination_point(start: LatLon, distance: float, initial_bearing: float) -> LatLon:
    """
    The point reached after travelling a distance along a geodesic. Unlike the
    distance and bearing functions this does not return NaN; FailedToConverge
    propagates to the caller.
    """
    return direct(start, distance, initial_bearing).point


def final_bearing_on(start: LatLon, distance: float, initial_bearing: float) -> float:
    """
    The bearing on arrival after travelling a distance along a geodesic.

    Args:
        start:
            The start point

        distance:
            Distance travelled (meters)

        initial_bearing:
            Initial bearing, in degrees from north

    Returns:
        Final bearing in degrees from north, to 1e-7°
    """
    try:
        brng = direct(start, distance, initial_bearing).final_bearing
    except ConvergenceError as err:
        LOGGER.debug('final bearing unresolved (%s); returning NaN', err)
        return math.nan

    return round_half_up(brng, 7)


def intermediate_point_to(point1: LatLon, point2: LatLon, fraction: float) -> LatLon:
    """
    The point lying a given fraction of the way along the geodesic from point1
    to point2.

    Nearly antipodal points raise ConvergenceError (Antipodal or FailedToConverge)
    rather than returning NaN.

    Args:
        point1:
            The start point

        point2:
            The end point

        fraction:
            Fraction of the distance between the points (0 = point1, 1 = point2)

    Returns:
        LatLon
    """
    fraction = coerce_float(fraction, 'fraction')
    if fraction == 0:
        return point1
    if fraction == 1:
        return point2

    result = inverse(point1, point2)
    if math.isnan(result.initial_bearing):
        return point1

    return destination_point(point1, result.distance * fraction, result.initial_bearing)
