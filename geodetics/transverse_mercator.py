"""
Transverse Mercator projection, using Krüger's series to 6th order in the third
flattening n (Karney 2011, "Transverse Mercator with an accuracy of a few
nanometers"). Accurate to a few nanometers within 3900km of the central meridian.
"""

__all__ = ['KrugerSeries', 'ProjectedPoint', 'GeographicPoint', 'forward', 'inverse', 'kruger_series']

from functools import lru_cache
import math
from typing import NamedTuple, Tuple

from geodetics._const import TM_MAX_ITERATIONS, TM_TAU_EPSILON
from geodetics.ellipsoids import Ellipsoid
from geodetics.exceptions import FailedToConverge


class KrugerSeries(NamedTuple):
    """Per-ellipsoid constants of the projection"""
    e: float  # eccentricity
    big_a: float  # 2πA is the circumference of a meridian
    alpha: Tuple[float, ...]  # forward coefficients α1..α6
    beta: Tuple[float, ...]  # inverse coefficients β1..β6


class ProjectedPoint(NamedTuple):
    """Grid coordinates relative to the central meridian and the equator"""
    x: float
    y: float
    convergence: float
    scale: float


class GeographicPoint(NamedTuple):
    lat: float
    lon: float
    convergence: float
    scale: float


@lru_cache(maxsize=16)
def kruger_series(ellipsoid: Ellipsoid) -> KrugerSeries:
    """
    Computes the Krüger series coefficients for an ellipsoid. Results are cached,
    so the series is evaluated once per ellipsoid.

    Args:
        ellipsoid:
            The ellipsoid being projected

    Returns:
        KrugerSeries
    """
    a, f = ellipsoid.a, ellipsoid.f
    e = math.sqrt(f * (2 - f))
    n = f / (2 - f)
    n2, n3, n4, n5, n6 = n ** 2, n ** 3, n ** 4, n ** 5, n ** 6

    big_a = a / (1 + n) * (1 + 1 / 4 * n2 + 1 / 64 * n4 + 1 / 256 * n6)

    alpha = (
        1 / 2 * n - 2 / 3 * n2 + 5 / 16 * n3 + 41 / 180 * n4 - 127 / 288 * n5 + 7891 / 37800 * n6,
        13 / 48 * n2 - 3 / 5 * n3 + 557 / 1440 * n4 + 281 / 630 * n5 - 1983433 / 1935360 * n6,
        61 / 240 * n3 - 103 / 140 * n4 + 15061 / 26880 * n5 + 167603 / 181440 * n6,
        49561 / 161280 * n4 - 179 / 168 * n5 + 6601661 / 7257600 * n6,
        34729 / 80640 * n5 - 3418889 / 1995840 * n6,
        212378941 / 319334400 * n6,
    )
    beta = (
        1 / 2 * n - 2 / 3 * n2 + 37 / 96 * n3 - 1 / 360 * n4 - 81 / 512 * n5 + 96199 / 604800 * n6,
        1 / 48 * n2 + 1 / 15 * n3 - 437 / 1440 * n4 + 46 / 105 * n5 - 1118711 / 3870720 * n6,
        17 / 480 * n3 - 37 / 840 * n4 - 209 / 4480 * n5 + 5569 / 90720 * n6,
        4397 / 161280 * n4 - 11 / 504 * n5 - 830251 / 7257600 * n6,
        4583 / 161280 * n5 - 108847 / 3991680 * n6,
        20648693 / 638668800 * n6,
    )
    return KrugerSeries(e, big_a, alpha, beta)


def forward(
    lat: float,
    lon: float,
    lon0: float,
    ellipsoid: Ellipsoid,
    k0: float
) -> ProjectedPoint:
    """
    Projects a geodetic latitude/longitude onto the transverse Mercator grid.

    Args:
        lat:
            Geodetic latitude (degrees)

        lon:
            Longitude (degrees)

        lon0:
            Longitude of the central meridian (degrees)

        ellipsoid:
            The ellipsoid of the point's datum

        k0:
            Scale factor on the central meridian

    Returns:
        ProjectedPoint of x (easting from the central meridian) and y (northing
        from the equator) in meters, with meridian convergence (degrees) and
        grid scale factor
    """
    series = kruger_series(ellipsoid)
    e, big_a, alpha = series.e, series.big_a, series.alpha

    phi = math.radians(lat)
    lam = math.radians(lon - lon0)
    cos_lam, sin_lam, tan_lam = math.cos(lam), math.sin(lam), math.tan(lam)

    # conformal latitude, via τ = tanφ
    tau = math.tan(phi)
    sigma = math.sinh(e * math.atanh(e * tau / math.sqrt(1 + tau * tau)))
    tau_c = tau * math.sqrt(1 + sigma * sigma) - sigma * math.sqrt(1 + tau * tau)

    xi_c = math.atan2(tau_c, cos_lam)
    eta_c = math.asinh(sin_lam / math.sqrt(tau_c * tau_c + cos_lam * cos_lam))

    xi, eta = xi_c, eta_c
    p_c, q_c = 1., 0.
    for j, coeff in enumerate(alpha, start=1):
        xi += coeff * math.sin(2 * j * xi_c) * math.cosh(2 * j * eta_c)
        eta += coeff * math.cos(2 * j * xi_c) * math.sinh(2 * j * eta_c)
        p_c += 2 * j * coeff * math.cos(2 * j * xi_c) * math.cosh(2 * j * eta_c)
        q_c += 2 * j * coeff * math.sin(2 * j * xi_c) * math.sinh(2 * j * eta_c)

    x = k0 * big_a * eta
    y = k0 * big_a * xi

    # convergence: Karney 2011 Eq 23, 24
    gamma = (
        math.atan(tau_c / math.sqrt(1 + tau_c * tau_c) * tan_lam) +
        math.atan2(q_c, p_c)
    )

    # scale: Karney 2011 Eq 25
    sin_phi = math.sin(phi)
    k = (
        k0 *
        math.sqrt(1 - e * e * sin_phi * sin_phi) * math.sqrt(1 + tau * tau) /
        math.sqrt(tau_c * tau_c + cos_lam * cos_lam) *
        (big_a / ellipsoid.a) * math.sqrt(p_c * p_c + q_c * q_c)
    )

    return ProjectedPoint(x, y, math.degrees(gamma), k)


def inverse(
    x: float,
    y: float,
    lon0: float,
    ellipsoid: Ellipsoid,
    k0: float
) -> GeographicPoint:
    """
    Unprojects transverse Mercator grid coordinates to geodetic latitude/longitude.

    Args:
        x:
            Easting from the central meridian (meters)

        y:
            Northing from the equator (meters)

        lon0:
            Longitude of the central meridian (degrees)

        ellipsoid:
            The ellipsoid of the grid's datum

        k0:
            Scale factor on the central meridian

    Returns:
        GeographicPoint of latitude and longitude (degrees), with meridian
        convergence (degrees) and grid scale factor
    """
    series = kruger_series(ellipsoid)
    e, big_a, beta = series.e, series.big_a, series.beta

    eta = x / (k0 * big_a)
    xi = y / (k0 * big_a)

    xi_c, eta_c = xi, eta
    for j, coeff in enumerate(beta, start=1):
        xi_c -= coeff * math.sin(2 * j * xi) * math.cosh(2 * j * eta)
        eta_c -= coeff * math.cos(2 * j * xi) * math.sinh(2 * j * eta)

    sinh_eta_c = math.sinh(eta_c)
    sin_xi_c, cos_xi_c = math.sin(xi_c), math.cos(xi_c)

    tau_c = sin_xi_c / math.sqrt(sinh_eta_c * sinh_eta_c + cos_xi_c * cos_xi_c)

    # Newton-Raphson for τ = tanφ, given τʹ
    tau = tau_c
    for _ in range(TM_MAX_ITERATIONS):
        sigma = math.sinh(e * math.atanh(e * tau / math.sqrt(1 + tau * tau)))
        tau_i = tau * math.sqrt(1 + sigma * sigma) - sigma * math.sqrt(1 + tau * tau)
        delta_tau = (
            (tau_c - tau_i) / math.sqrt(1 + tau_i * tau_i) *
            (1 + (1 - e * e) * tau * tau) /
            ((1 - e * e) * math.sqrt(1 + tau * tau))
        )
        tau += delta_tau
        if abs(delta_tau) <= TM_TAU_EPSILON:
            break
    else:
        raise FailedToConverge('transverse Mercator inverse failed to converge')

    phi = math.atan(tau)
    lam = math.atan2(sinh_eta_c, cos_xi_c)

    # convergence: Karney 2011 Eq 26, 27
    p = 1.
    q = 0.
    for j, coeff in enumerate(beta, start=1):
        p -= 2 * j * coeff * math.cos(2 * j * xi) * math.cosh(2 * j * eta)
        q += 2 * j * coeff * math.sin(2 * j * xi) * math.sinh(2 * j * eta)

    gamma = math.atan(math.tan(xi_c) * math.tanh(eta_c)) + math.atan2(q, p)

    # scale: Karney 2011 Eq 28
    sin_phi = math.sin(phi)
    k = (
        k0 *
        math.sqrt(1 - e * e * sin_phi * sin_phi) * math.sqrt(1 + tau * tau) *
        math.sqrt(sinh_eta_c * sinh_eta_c + cos_xi_c * cos_xi_c) *
        big_a / ellipsoid.a / math.sqrt(p * p + q * q)
    )

    return GeographicPoint(math.degrees(phi), math.degrees(lam) + lon0, math.degrees(gamma), k)
