from datetime import datetime, timedelta, timezone

import pytest
from pytz import utc

from celestialcalc.angles.conversion import clock_time_to_decimal
from celestialcalc.errors import TimeZoneError
from celestialcalc.models import ClockTime
from celestialcalc.sidereal.converter import (
    julian_day,
    local_civilian_to_sidereal_time,
    local_to_universal_time,
    localize,
    prime_to_local_sidereal_time,
    solar_to_prime_sidereal_time,
)


def test_julian_day():
    assert julian_day(2000, 1, 1) == 2451544.5
    assert julian_day(2010, 1, 1) == 2455197.5
    assert julian_day(2010, 2, 7) == 2455234.5


class TestUniversalTime:
    def test_local_to_universal_time(self):
        local = localize(datetime(2016, 1, 21, 21, 30), "America/New_York")
        ut = local_to_universal_time(local)
        assert ut.utcoffset() == timedelta(0)
        assert ut.replace(tzinfo=None) == datetime(2016, 1, 22, 2, 30)

    def test_fixed_offset_is_accepted(self):
        local = datetime(2016, 1, 21, 21, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert local_to_universal_time(local).hour == 2

    def test_naive_datetime_rejected(self):
        with pytest.raises(TimeZoneError, match="no UTC offset"):
            local_to_universal_time(datetime(2016, 1, 21, 21, 30))

    def test_unknown_zone_rejected(self):
        with pytest.raises(TimeZoneError, match="unknown time zone"):
            localize(datetime(2016, 1, 21, 21, 30), "Mars/Olympus_Mons")

    def test_nonexistent_local_time_rejected(self):
        with pytest.raises(TimeZoneError):
            localize(datetime(2016, 3, 13, 2, 30), "America/New_York")

    def test_ambiguous_local_time_rejected(self):
        with pytest.raises(TimeZoneError):
            localize(datetime(2016, 11, 6, 1, 30), "America/New_York")


class TestGreenwichSiderealTime:
    def test_reference_2010(self):
        ut = datetime(2010, 2, 7, 23, 30, tzinfo=utc)
        assert solar_to_prime_sidereal_time(ut) == pytest.approx(
            8.698090630099976, abs=1e-6
        )

    def test_reference_2014(self):
        ut = datetime(2014, 12, 13, 1, 0, tzinfo=utc)
        assert solar_to_prime_sidereal_time(ut) == pytest.approx(
            6.442866622675775, abs=1e-6
        )

    def test_zone_of_input_does_not_matter(self):
        ut = datetime(2010, 2, 7, 23, 30, tzinfo=utc)
        local = localize(datetime(2010, 2, 7, 18, 30), "America/New_York")
        assert solar_to_prime_sidereal_time(local) == pytest.approx(
            solar_to_prime_sidereal_time(ut), abs=1e-12
        )

    @pytest.mark.parametrize("hour", [0, 6, 12, 18, 23])
    def test_result_in_range(self, hour):
        gst = solar_to_prime_sidereal_time(datetime(2021, 7, 4, hour, 15, tzinfo=utc))
        assert 0 <= gst < 24

    @pytest.mark.parametrize(
        "ut",
        [
            datetime(2010, 2, 7, 23, 30, tzinfo=utc),
            datetime(2014, 12, 13, 1, 0, tzinfo=utc),
            datetime(2024, 6, 21, 12, 0, tzinfo=utc),
        ],
    )
    def test_agrees_with_skyfield(self, ut):
        skyfield_api = pytest.importorskip("skyfield.api")
        ts = skyfield_api.load.timescale(builtin=True)
        expected = ts.from_datetime(ut).gmst
        assert solar_to_prime_sidereal_time(ut) == pytest.approx(expected, abs=1e-3)


class TestLocalSiderealTime:
    def test_wraps_below_zero(self):
        gst = clock_time_to_decimal(ClockTime(2, 3, 41))
        assert prime_to_local_sidereal_time(gst, -40.0) == pytest.approx(
            23.39472222222222
        )

    def test_wraps_above_24(self):
        assert prime_to_local_sidereal_time(23.0, 30.0) == pytest.approx(1.0)

    def test_greenwich_unchanged(self):
        assert prime_to_local_sidereal_time(12.5, 0.0) == 12.5

    def test_composite_matches_steps(self):
        local = localize(datetime(2016, 1, 21, 21, 30), "America/New_York")
        gst = solar_to_prime_sidereal_time(local)
        expected = prime_to_local_sidereal_time(gst, -78.0)
        assert local_civilian_to_sidereal_time(local, -78.0) == expected
        assert 0 <= expected < 24
