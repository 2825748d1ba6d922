"""
Tests for the solar ephemeris and the sub-solar point.

Known-date checks use the 2024 equinoxes and solstices; the sign of the
equation-of-time correction is checked against an independent route to
the sub-solar longitude (right ascension minus sidereal time).
"""

from datetime import datetime, timedelta

import pytest
from hypothesis import given
from hypothesis import strategies as st

from conftest import (
    DECEMBER_SOLSTICE,
    JUNE_SOLSTICE,
    MARCH_EQUINOX,
    SEPTEMBER_EQUINOX,
    angle_diff,
    utc,
)
from daynightmap.julian import (
    greenwich_mean_sidereal_time,
    julian_century,
    normalize_longitude,
    to_julian_date,
)
from daynightmap.models import GeoPoint
from daynightmap.solar import (
    antipode,
    equation_of_time,
    mean_obliquity,
    solar_declination,
    solar_right_ascension,
    sub_solar_point,
)

instants = st.datetimes(min_value=datetime(1900, 1, 1), max_value=datetime(2100, 1, 1))


class TestSolarDeclination:
    @pytest.mark.parametrize("when", [MARCH_EQUINOX, SEPTEMBER_EQUINOX])
    def test_near_zero_at_equinox(self, when):
        assert abs(solar_declination(when)) < 0.5

    def test_june_solstice(self):
        assert 23.0 < solar_declination(JUNE_SOLSTICE) < 23.5

    def test_december_solstice(self):
        assert -23.5 < solar_declination(DECEMBER_SOLSTICE) < -23.0

    @given(when=instants)
    def test_bounded_by_obliquity(self, when):
        eps = mean_obliquity(julian_century(to_julian_date(when)))
        assert abs(solar_declination(when)) <= eps + 1e-9
        assert abs(solar_declination(when)) <= 23.44 + 0.01

    def test_increasing_through_march(self):
        before = solar_declination(MARCH_EQUINOX - timedelta(days=1))
        after = solar_declination(MARCH_EQUINOX + timedelta(days=1))
        assert before < 0 < after


class TestEquationOfTime:
    def test_near_zero_mid_april(self):
        assert abs(equation_of_time(utc(2024, 4, 15, 12))) < 1.5

    def test_negative_extremum_february(self):
        assert -16 < equation_of_time(utc(2024, 2, 12, 12)) < -12

    def test_positive_extremum_november(self):
        assert 14 < equation_of_time(utc(2024, 11, 3, 12)) < 18

    def test_bounded_over_a_year(self):
        for day in range(0, 366, 5):
            eot = equation_of_time(utc(2024, 1, 1) + timedelta(days=day))
            assert -15 < eot < 17


class TestSubSolarPoint:
    def test_latitude_is_declination(self):
        when = utc(2024, 6, 21, 12)
        assert sub_solar_point(when).lat == solar_declination(when)

    @given(when=instants)
    def test_latitude_is_declination_everywhere(self, when):
        assert sub_solar_point(when).lat == solar_declination(when)

    def test_noon_at_equinox_over_prime_meridian(self):
        ssp = sub_solar_point(utc(2024, 3, 20, 12))
        assert abs(ssp.lat) < 1
        assert abs(ssp.lng) < 5

    def test_midnight_over_antimeridian(self):
        ssp = sub_solar_point(utc(2024, 6, 21, 0))
        assert abs(abs(ssp.lng) - 180) < 10

    def test_longitude_in_range_all_day(self):
        for hour in range(24):
            ssp = sub_solar_point(utc(2024, 1, 15, hour))
            assert -180 <= ssp.lng <= 180

    def test_moves_west_fifteen_degrees_per_hour(self):
        a = sub_solar_point(utc(2024, 8, 1, 10))
        b = sub_solar_point(utc(2024, 8, 1, 11))
        assert angle_diff(b.lng, a.lng) == pytest.approx(-15.0, abs=0.01)

    def test_november_sun_is_west_of_greenwich_at_noon(self):
        # Sundial ~16 min ahead: local apparent noon at Greenwich was at 11:44 UTC
        ssp = sub_solar_point(utc(2024, 11, 3, 12))
        assert -4.5 < ssp.lng < -3.5

    @pytest.mark.parametrize("day", range(0, 366, 15))
    def test_agrees_with_right_ascension_route(self, day):
        when = utc(2024, 1, 1, 9) + timedelta(days=day)
        gmst = greenwich_mean_sidereal_time(to_julian_date(when))
        expected = normalize_longitude(solar_right_ascension(when) - gmst)
        assert abs(angle_diff(sub_solar_point(when).lng, expected)) < 0.1


class TestAntipode:
    def test_origin(self):
        assert antipode(GeoPoint(0.0, 0.0)) == GeoPoint(-0.0, 180.0)

    def test_antimeridian(self):
        assert antipode(GeoPoint(10.0, 180.0)) == GeoPoint(-10.0, 0.0)

    def test_west(self):
        assert antipode(GeoPoint(-33.9, -70.7)) == GeoPoint(33.9, pytest.approx(109.3))

    @given(
        lat=st.floats(min_value=-90.0, max_value=90.0),
        lng=st.floats(min_value=-180.0, max_value=180.0, exclude_min=True),
    )
    def test_involution(self, lat, lng):
        p = GeoPoint(lat, lng)
        back = antipode(antipode(p))
        assert back.lat == p.lat
        assert back.lng == pytest.approx(p.lng, abs=1e-9)

    @given(
        lat=st.floats(min_value=-90.0, max_value=90.0),
        lng=st.floats(min_value=-180.0, max_value=180.0, exclude_min=True),
    )
    def test_stays_in_range(self, lat, lng):
        a = antipode(GeoPoint(lat, lng))
        assert -180.0 < a.lng <= 180.0
        assert abs(angle_diff(a.lng, lng)) == pytest.approx(180.0, abs=1e-9)
