import pytest

from geodetics import (
    InvalidBand, InvalidGridSquare, InvalidMgrsField, InvalidPrecision, LatLon, Mgrs, Utm, datums
)


def test_mgrs_init():
    mgrs = Mgrs(31, 'U', 'D', 'Q', 48251, 11932)
    assert mgrs.zone == 31
    assert mgrs.band == 'U'
    assert mgrs.e100k == 'D'
    assert mgrs.n100k == 'Q'
    assert mgrs.easting == 48251
    assert mgrs.northing == 11932
    assert mgrs.datum == datums.WGS84
    assert mgrs.to_str() == '31U DQ 48251 11932'

    assert Mgrs('31', 'U', 'D', 'Q', '48251', '11932', 'OSGB36').datum == datums.OSGB36


def test_mgrs_init_invalid():
    with pytest.raises(InvalidMgrsField, match='invalid MGRS zone ‘0’'):
        Mgrs(0, 'C', 'A', 'A', 0, 0)

    with pytest.raises(InvalidMgrsField, match='invalid MGRS zone ‘1.5’'):
        Mgrs(1.5, 'C', 'A', 'A', 0, 0)

    with pytest.raises(InvalidBand, match='invalid MGRS band ‘A’'):
        Mgrs(1, 'A', 'A', 'A', 0, 0)

    with pytest.raises(InvalidGridSquare, match='invalid MGRS 100km grid square column ‘I’ for zone 1'):
        Mgrs(1, 'C', 'I', 'A', 0, 0)

    with pytest.raises(InvalidGridSquare, match='invalid MGRS 100km grid square row ‘I’'):
        Mgrs(1, 'C', 'A', 'I', 0, 0)

    with pytest.raises(InvalidGridSquare, match='invalid MGRS 100km grid square column ‘A’ for zone 2'):
        Mgrs(2, 'C', 'A', 'A', 0, 0)

    with pytest.raises(InvalidMgrsField, match='invalid MGRS easting ‘x’'):
        Mgrs(1, 'C', 'A', 'A', 'x', 0)

    with pytest.raises(InvalidMgrsField, match='invalid MGRS easting ‘999999'):
        Mgrs(1, 'C', 'A', 'A', 999999, 0)

    with pytest.raises(InvalidMgrsField, match='invalid MGRS northing ‘x’'):
        Mgrs(1, 'C', 'A', 'A', 0, 'x')

    with pytest.raises(InvalidMgrsField, match='invalid MGRS northing ‘999999'):
        Mgrs(1, 'C', 'A', 'A', 0, 999999)


def test_mgrs_init_multiple_errors():
    with pytest.raises(InvalidMgrsField) as exc:
        Mgrs(1, 'A', 'A', 'I', 0, 0)

    assert str(exc.value) == 'invalid MGRS band ‘A’, invalid MGRS 100km grid square row ‘I’'
    assert not isinstance(exc.value, InvalidBand)


def test_mgrs_dunders():
    mgrs = Mgrs(31, 'U', 'D', 'Q', 48251, 11932)
    assert mgrs == Mgrs(31, 'U', 'D', 'Q', 48251, 11932)
    assert mgrs != Mgrs(31, 'U', 'D', 'Q', 48251, 11933)
    assert mgrs != Mgrs(31, 'U', 'D', 'Q', 48251, 11932, datums.ED50)
    assert mgrs != '31U DQ 48251 11932'
    assert len({mgrs, Mgrs(31, 'U', 'D', 'Q', 48251, 11932), Mgrs(31, 'U', 'D', 'R', 48251, 11932)}) == 2

    assert repr(mgrs) == '<Mgrs(31U DQ 48251 11932, WGS84)>'
    assert str(mgrs) == '31U DQ 48251 11932'


def test_mgrs_parse():
    assert Mgrs.parse('31U DQ 48251 11932').to_str() == '31U DQ 48251 11932'
    assert Mgrs.parse('31UDQ4825111932').to_str() == '31U DQ 48251 11932'
    assert Mgrs.parse(' 31u dq 48251 11932 ') == Mgrs(31, 'U', 'D', 'Q', 48251, 11932)
    assert Mgrs.parse('31U DQ 48251 11932', datums.ED50).datum == datums.ED50

    assert Mgrs.parse('4Q FJ 1 6').to_str(2) == '04Q FJ 1 6'
    assert Mgrs.parse('4Q FJ 12 67').to_str(4) == '04Q FJ 12 67'
    assert Mgrs.parse('4Q FJ 123 678').to_str(6) == '04Q FJ 123 678'
    assert Mgrs.parse('4Q FJ 1234 6789').to_str(8) == '04Q FJ 1234 6789'
    assert Mgrs.parse('4Q FJ 12345 67890').to_str(10) == '04Q FJ 12345 67890'

    # short values are the leading digits of a 5-digit value
    assert Mgrs.parse('4Q FJ 1 6').easting == 10000
    assert Mgrs.parse('4Q FJ 1 6').northing == 60000

    assert Mgrs.parse('18SUU80').to_str(2) == '18S UU 8 0'
    assert Mgrs.parse('18SUU8401').to_str(4) == '18S UU 84 01'
    assert Mgrs.parse('18SUU836014').to_str(6) == '18S UU 836 014'


def test_mgrs_parse_invalid():
    with pytest.raises(InvalidMgrsField, match='invalid MGRS grid reference ‘None’'):
        Mgrs.parse(None)

    with pytest.raises(InvalidMgrsField, match='invalid MGRS grid reference ‘Cambridge’'):
        Mgrs.parse('Cambridge')

    with pytest.raises(InvalidMgrsField, match='invalid MGRS grid reference ‘New York’'):
        Mgrs.parse('New York')

    # odd number of digits in the military form
    with pytest.raises(InvalidMgrsField, match='invalid MGRS grid reference'):
        Mgrs.parse('18SUU801')

    with pytest.raises(InvalidMgrsField, match='invalid MGRS grid reference'):
        Mgrs.parse('18 UU 80 01')


def test_mgrs_to_str():
    mgrs = Mgrs(31, 'U', 'D', 'Q', 48251.9, 11932.9)
    assert mgrs.to_str() == '31U DQ 48251 11932'
    assert mgrs.to_str(8) == '31U DQ 4825 1193'
    assert mgrs.to_str(2) == '31U DQ 4 1'

    with pytest.raises(InvalidPrecision, match='invalid MGRS precision ‘3’'):
        Mgrs(1, 'C', 'A', 'A', 0, 0).to_str(3)


def test_utm_to_mgrs():
    assert Utm.parse('31 N 166021.443081 0.000000').to_mgrs().to_str() == '31N AA 66021 00000'
    assert Utm.parse('31 N 277438.263521 110597.972524').to_mgrs().to_str() == '31N BB 77438 10597'
    assert Utm.parse('30 S 722561.736479 9889402.027476').to_mgrs().to_str() == '30M YD 22561 89402'
    assert Utm.parse('31 N 448251.898 5411943.794').to_mgrs().to_str() == '31U DQ 48251 11943'
    assert Utm.parse('56 S 334873.199 6252266.092').to_mgrs().to_str() == '56H LH 34873 52266'
    assert Utm.parse('18 N 323394.296 4307395.634').to_mgrs().to_str() == '18S UJ 23394 07395'
    assert Utm.parse('23 S 683466.254 7460687.433').to_mgrs().to_str() == '23K PQ 83466 60687'
    assert Utm.parse('32 N 297508.410 6700645.296').to_mgrs().to_str() == '32V KN 97508 00645'

    mgrs = Utm(31, 'N', 448251, 5411932, datums.OSGB36).to_mgrs()
    assert mgrs.datum == datums.OSGB36


def test_mgrs_to_utm():
    assert Mgrs.parse('31U DQ 48251 11932').to_utm().to_str() == '31 N 448251 5411932'
    assert Mgrs.parse('31N AA 66021 00000').to_utm().to_str() == '31 N 166021 0'
    assert Mgrs.parse('31N BB 77438 10597').to_utm().to_str() == '31 N 277438 110597'
    assert Mgrs.parse('30M YD 22561 89402').to_utm().to_str() == '30 S 722561 9889402'
    assert Mgrs.parse('31U DQ 48251 11943').to_utm().to_str() == '31 N 448251 5411943'
    assert Mgrs.parse('56H LH 34873 52266').to_utm().to_str() == '56 S 334873 6252266'
    assert Mgrs.parse('18S UJ 23394 07395').to_utm().to_str() == '18 N 323394 4307395'
    assert Mgrs.parse('23K PQ 83466 60687').to_utm().to_str() == '23 S 683466 7460687'
    assert Mgrs.parse('32V KN 97508 00645').to_utm().to_str() == '32 N 297508 6700645'

    # bands straddling a 2,000km block boundary
    assert Mgrs.parse('01P ET 00000 68935').to_utm().to_str() == '01 N 500000 1768935'
    assert Mgrs.parse('01Q ET 00000 68935').to_utm().to_str() == '01 N 500000 1768935'
    assert Utm.parse('31 N 500000 7097014').to_mgrs().to_utm().to_str() == '31 N 500000 7097014'

    assert Mgrs.parse('12S TC 52 86').to_utm().to_str() == '12 N 252000 3786000'


def test_mgrs_to_utm_truncates(caplog, monkeypatch):
    monkeypatch.setattr('geodetics.utils.logging._WARNINGS', set())

    assert Mgrs.parse('12S TC 52000.123 86000.123').to_utm().to_str(3) == '12 N 252000.000 3786000.000'
    assert 'truncated' in caplog.text

    mgrs = Mgrs.parse('12S TC 52999.999 86999.999')
    assert mgrs.to_str(6) == '12S TC 529 869'
    assert mgrs.to_utm().to_str() == '12 N 252999 3786999'


def test_latlon_mgrs_round_trip():
    for lat, lon in ((64, 0), (64, 3), (-64, 0), (-64, 3), (-80, 0)):
        point = LatLon(lat, lon).to_utm().to_mgrs().to_utm().to_latlon()
        assert point.lat == pytest.approx(lat, abs=1e-4)
        assert point.lon == pytest.approx(lon, abs=1e-4)

    assert LatLon(-80, 0).to_utm().to_mgrs().band == 'C'


def test_latlon_to_mgrs():
    utm = LatLon(0.13, -0.2324).to_utm()
    assert utm.to_str() == '30 N 808084 14386'
    assert utm.to_mgrs().to_str() == '30N ZF 08084 14385'

    assert LatLon(48.8582, 2.2945).to_utm().to_str() == '31 N 448252 5411933'
    assert Utm.parse('34 S 683473 4942631').to_latlon().to_str() == '45.6456°S, 023.3545°E'
    assert Utm.parse('30 N 808084 14385').to_latlon().to_str() == '00.1300°N, 000.2324°W'
