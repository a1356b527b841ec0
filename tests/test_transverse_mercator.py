import pytest

from geodetics import ellipsoids
from geodetics.transverse_mercator import forward, inverse, kruger_series

K0 = 0.9996


def test_kruger_series_cached():
    kruger_series.cache_clear()
    series = kruger_series(ellipsoids.WGS84)
    assert kruger_series(ellipsoids.WGS84) is series
    assert kruger_series.cache_info().hits == 1

    assert len(series.alpha) == 6
    assert len(series.beta) == 6
    assert series.e == pytest.approx(0.0818191908426)
    # rectifying radius
    assert series.big_a == pytest.approx(6367449.1458, abs=1e-3)


def test_forward_on_central_meridian():
    projected = forward(0, 3, 3, ellipsoids.WGS84, K0)
    assert projected.x == 0
    assert projected.y == 0
    assert projected.convergence == 0
    assert projected.scale == pytest.approx(K0)

    # quarter meridian, scaled
    projected = forward(90, 3, 3, ellipsoids.WGS84, 1)
    assert projected.y == pytest.approx(10001965.729, abs=1e-3)


def test_forward_symmetry():
    east = forward(45, 5, 3, ellipsoids.WGS84, K0)
    west = forward(45, 1, 3, ellipsoids.WGS84, K0)
    assert east.x == pytest.approx(-west.x)
    assert east.y == pytest.approx(west.y)
    assert east.convergence == pytest.approx(-west.convergence)

    south = forward(-45, 5, 3, ellipsoids.WGS84, K0)
    assert south.y == pytest.approx(-east.y)


def test_round_trip():
    for lat, lon in ((0, 0), (48.8583, 2.2945), (-33.857, 151.215), (60.39135, 5.3249), (83.9, 179)):
        lon0 = (lon // 6) * 6 + 3
        projected = forward(lat, lon, lon0, ellipsoids.WGS84, K0)
        geographic = inverse(projected.x, projected.y, lon0, ellipsoids.WGS84, K0)

        assert geographic.lat == pytest.approx(lat, abs=1e-10)
        assert geographic.lon == pytest.approx(lon, abs=1e-10)
        assert geographic.convergence == pytest.approx(projected.convergence, abs=1e-9)
        assert geographic.scale == pytest.approx(projected.scale, abs=1e-10)


def test_other_ellipsoid():
    wgs84 = forward(52, 1, -2, ellipsoids.WGS84, 0.9996012717)
    airy = forward(52, 1, -2, ellipsoids.AIRY1830, 0.9996012717)
    assert wgs84.x != airy.x
    assert wgs84.y != pytest.approx(airy.y, abs=1)
