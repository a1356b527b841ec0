import numpy as np
import pytest

from geodetics import Cartesian, InvalidCoordinate, LatLon, Singular, UnknownDatum, datums, ellipsoids
from geodetics.cartesian import cartesian_to_geodetic, geodetic_to_cartesian
from geodetics.datums import HelmertTransform


def test_cartesian_init():
    point = Cartesian(1., '2', 3)
    assert point.x == 1.
    assert point.y == 2.
    assert point.z == 3.
    assert point.datum is None

    assert Cartesian(1, 2, 3, 'OSGB36').datum == datums.OSGB36

    with pytest.raises(InvalidCoordinate, match='invalid x coordinate'):
        Cartesian('a', 2, 3)

    with pytest.raises(UnknownDatum):
        Cartesian(1, 2, 3, 'xx')


def test_cartesian_dunders():
    point = Cartesian(1, 2, 3)
    assert point == Cartesian(1, 2, 3)
    assert point != Cartesian(1, 2, 3, datums.WGS84)
    assert point != (1, 2, 3)
    assert len({point, Cartesian(1, 2, 3), Cartesian(3, 2, 1)}) == 2

    assert list(point) == [1., 2., 3.]
    assert repr(point) == '<Cartesian(1.0, 2.0, 3.0)>'
    assert repr(Cartesian(1, 2, 3, datums.ED50)) == '<Cartesian(1.0, 2.0, 3.0, ED50)>'
    assert str(point) == '[1,2,3]'


def test_cartesian_to_str():
    point = Cartesian(3194419.1455, 3194419.1455, 4487348.4088)
    assert point.to_str() == '[3194419,3194419,4487348]'
    assert point.to_str(2) == '[3194419.15,3194419.15,4487348.41]'


def test_cartesian_arrays():
    point = Cartesian.from_array(np.array([1., 2., 3.]), datums.WGS84)
    assert point == Cartesian(1, 2, 3, datums.WGS84)
    assert point.to_array().tolist() == [1., 2., 3.]


def test_geodetic_to_cartesian():
    x, y, z = geodetic_to_cartesian(0, 0, 0, ellipsoids.WGS84)
    assert (x, y, z) == pytest.approx((6378137, 0, 0))

    x, y, z = geodetic_to_cartesian(90, 0, 0, ellipsoids.WGS84)
    assert (x, y, z) == pytest.approx((0, 0, 6356752.314245), abs=1e-3)

    assert LatLon(45, 45).to_cartesian().to_str() == '[3194419,3194419,4487348]'
    assert LatLon.parse('45N, 45E').to_cartesian().datum == datums.WGS84


def test_cartesian_to_geodetic():
    lat, lon, height = cartesian_to_geodetic(3194419, 3194419, 4487348, ellipsoids.WGS84)
    assert lat == pytest.approx(45, abs=1e-5)
    assert lon == pytest.approx(45)
    assert height == pytest.approx(0, abs=1)

    # on the polar axis
    assert cartesian_to_geodetic(0, 0, 6356752.314245, ellipsoids.WGS84) == pytest.approx((90, 0, 0))
    assert cartesian_to_geodetic(0, 0, -6356852.314245, ellipsoids.WGS84) == pytest.approx((-90, 0, 100))

    with pytest.raises(Singular):
        cartesian_to_geodetic(0, 0, 0, ellipsoids.WGS84)


def test_cartesian_round_trip():
    for lat, lon, height in ((51.47788, -0.00147, 46), (-33.857, 151.215, 0), (89.9, -179.9, 8848)):
        point = LatLon(lat, lon, height, datums.OSGB36)
        converted = point.to_cartesian().to_latlon()
        assert converted.datum == datums.OSGB36
        assert converted.lat == pytest.approx(lat, abs=1e-9)
        assert converted.lon == pytest.approx(lon, abs=1e-9)
        assert converted.height == pytest.approx(height, abs=1e-6)

    for datum in (datums.WGS84, datums.OSGB36, datums.POTSDAM, datums.NAD27, datums.ED50):
        for lat, lon, height in ((45, 45, -10e3), (-60.5, -120.25, 10e6), (0, 179.5, 10e6), (80, 0.1, -10e3)):
            converted = LatLon(lat, lon, height, datum).to_cartesian().to_latlon()
            assert converted.lat == pytest.approx(lat, abs=1e-9)
            assert converted.lon == pytest.approx(lon, abs=1e-9)
            assert converted.height == pytest.approx(height, abs=1e-6)


def test_cartesian_to_latlon():
    assert Cartesian(3194419, 3194419, 4487348).to_latlon().to_str() == '45.0000°N, 045.0000°E'

    # the datum's ellipsoid is used
    point = Cartesian(3194419, 3194419, 4487348, datums.ED50).to_latlon()
    assert point.datum == datums.ED50
    assert point.height != pytest.approx(0, abs=1)


def test_cartesian_apply_transform():
    point = Cartesian(1, 2, 3, datums.WGS84)
    shifted = point.apply_transform(HelmertTransform(10, 10, 10, 0, 0, 0, 0))
    assert shifted == Cartesian(11, 12, 13)
    assert shifted.datum is None


def test_cartesian_convert_datum():
    point = LatLon(53, 1, 50).to_cartesian()
    converted = point.convert_datum(datums.OSGB36)
    assert converted.datum == datums.OSGB36

    round_trip = converted.convert_datum('WGS84')
    assert round_trip.datum == datums.WGS84
    assert list(round_trip) == pytest.approx(list(point), abs=0.1)

    with pytest.raises(UnknownDatum, match='cartesian coordinate has no datum'):
        Cartesian(1, 2, 3).convert_datum(datums.WGS84)

    with pytest.raises(UnknownDatum, match='unrecognised datum ‘xx’'):
        point.convert_datum('xx')
