"""Civil time to Greenwich and local sidereal time.

Uses the 1900-epoch polynomial for sidereal time at 0h UT of the date.
"""

import datetime

from pytz import timezone, utc
from pytz.exceptions import (
    AmbiguousTimeError,
    NonExistentTimeError,
    UnknownTimeZoneError,
)

from ..angles.conversion import clock_time_to_decimal
from ..errors import TimeZoneError

SIDEREAL_EPOCH_JD = 2_415_020.0  # 1900 January 0.5
DAYS_PER_CENTURY = 36_525.0
SIDEREAL_RATE = 1.002738


def julian_day(year: int, month: int, day: int) -> float:
    """Julian Day at 0h UT of a Gregorian calendar date."""
    if month <= 2:
        year -= 1
        month += 12

    a = year // 100
    b = 2 - a + a // 4

    return int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + day + b - 1524.5


def localize(local_dt: datetime.datetime, tz_name: str) -> datetime.datetime:
    """Attach an IANA time zone to a naive local civil date-time.

    Args:
        local_dt: Naive local date-time
        tz_name: IANA zone name (e.g. "America/New_York")

    Returns:
        Timezone-aware datetime

    Raises:
        TimeZoneError: If the zone is unknown or the local time is ambiguous
            or skipped by a daylight-saving transition
    """
    try:
        zone = timezone(tz_name)
        return zone.localize(local_dt, is_dst=None)
    except UnknownTimeZoneError:
        raise TimeZoneError(tz_name, "unknown time zone")
    except AmbiguousTimeError:
        raise TimeZoneError(tz_name, f"{local_dt.isoformat()} is ambiguous")
    except NonExistentTimeError:
        raise TimeZoneError(tz_name, f"{local_dt.isoformat()} does not exist")


def local_to_universal_time(zdt: datetime.datetime) -> datetime.datetime:
    """Convert a timezone-aware civil date-time to UTC.

    Raises:
        TimeZoneError: If ``zdt`` is naive or its tzinfo yields no offset
    """
    if zdt.tzinfo is None or zdt.utcoffset() is None:
        raise TimeZoneError(zdt.isoformat(), "datetime has no UTC offset")
    return zdt.astimezone(utc)


def _wrap_once(hours: float) -> float:
    if hours < 0:
        hours += 24
    if hours >= 24:
        hours -= 24
    return hours


def solar_to_prime_sidereal_time(zdt: datetime.datetime) -> float:
    """Convert a civil date-time to Greenwich Mean Sidereal Time.

    Args:
        zdt: Timezone-aware date-time in any zone

    Returns:
        GMST in decimal hours, in [0, 24)
    """
    ut = local_to_universal_time(zdt)
    year = ut.year

    jd = julian_day(year, ut.month, ut.day)
    jd_0 = julian_day(year, 1, 1)
    days = jd - jd_0

    t = (jd_0 - SIDEREAL_EPOCH_JD) / DAYS_PER_CENTURY
    r = 6.6460656 + 2400.051262 * t + 0.00002581 * t**2
    b = 24 - r + 24 * (year - 1900)
    t_0 = 0.0657098 * days - b

    ut_hours = clock_time_to_decimal(ut.time())
    return _wrap_once(t_0 + SIDEREAL_RATE * ut_hours)


def prime_to_local_sidereal_time(prime_sidereal_time: float, longitude: float) -> float:
    """Adjust Greenwich sidereal time to an observer's longitude.

    Args:
        prime_sidereal_time: GMST in decimal hours
        longitude: Observer longitude in degrees (west negative)

    Returns:
        Local sidereal time in decimal hours, in [0, 24)
    """
    return _wrap_once(prime_sidereal_time + longitude / 15)


def local_civilian_to_sidereal_time(lct: datetime.datetime, longitude: float) -> float:
    """Convert an observer's local civil date-time to local sidereal time (hours)."""
    gst = solar_to_prime_sidereal_time(lct)
    return prime_to_local_sidereal_time(gst, longitude)
