import pytest

from geodetics import ellipsoids
from geodetics.ellipsoids import ELLIPSOIDS, Ellipsoid, get_ellipsoid


def test_ellipsoid_properties():
    wgs84 = ellipsoids.WGS84
    assert wgs84.a == 6378137
    assert wgs84.b == pytest.approx(6356752.314245)
    assert wgs84.f == pytest.approx(1 / 298.257223563)

    assert wgs84.eccentricity_sq == pytest.approx(0.00669437999014)
    assert wgs84.third_flattening == pytest.approx(wgs84.f / (2 - wgs84.f))


def test_ellipsoid_consistency():
    # a, b and f are redundant; check each registered ellipsoid agrees with itself
    for ellipsoid in ELLIPSOIDS.values():
        assert (ellipsoid.a - ellipsoid.b) / ellipsoid.a == pytest.approx(ellipsoid.f, abs=1e-8)


def test_ellipsoid_repr():
    assert repr(ellipsoids.AIRY1830) == '<Ellipsoid(Airy1830)>'


def test_ellipsoid_is_hashable():
    assert len({ellipsoids.WGS84, ellipsoids.WGS84, ellipsoids.GRS80}) == 2
    assert ellipsoids.WGS84 == Ellipsoid('WGS84', ellipsoids.WGS84.a, ellipsoids.WGS84.b, ellipsoids.WGS84.f)


def test_get_ellipsoid():
    assert get_ellipsoid('Bessel1841') is ellipsoids.BESSEL1841

    with pytest.raises(KeyError, match='unrecognised ellipsoid'):
        get_ellipsoid('Everest')


def test_ellipsoid_registry_is_readonly():
    with pytest.raises(TypeError):
        ELLIPSOIDS['Everest'] = ellipsoids.WGS84  # type: ignore
