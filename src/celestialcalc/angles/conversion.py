"""Conversion between sexagesimal angles/clock times and decimal values."""

import datetime
import math

from ..models.angle import Angle, ClockTime


def angle_to_decimal(angle: Angle) -> float:
    """Convert an angle in degrees/minutes/seconds to decimal degrees.

    Args:
        angle: Angle to convert (minutes and seconds are not range-checked)

    Returns:
        Signed decimal degrees
    """
    sign = -1 if angle.is_negative else 1
    decimal_minutes = angle.seconds / 60
    total_minutes = angle.minutes + decimal_minutes
    return sign * (abs(angle.degrees) + total_minutes / 60)


def decimal_to_angle(decimal: float) -> Angle:
    """Convert decimal degrees to an angle in degrees/minutes/seconds.

    Seconds are rounded to two decimal places and are not carried into
    minutes, so a value just below a whole minute can yield ``seconds == 60.0``.

    Args:
        decimal: Signed decimal degrees

    Returns:
        Angle with non-negative fields and the sign in ``is_negative``
    """
    abs_decimal = abs(decimal)
    degrees = math.trunc(abs_decimal)
    decimal_minutes = 60 * math.modf(abs_decimal)[0]
    minutes = math.trunc(decimal_minutes)
    decimal_seconds = 60 * math.modf(decimal_minutes)[0]
    seconds = round(decimal_seconds, 2)
    return Angle(degrees, minutes, seconds, is_negative=decimal < 0)


def clock_time_to_decimal(value: ClockTime | datetime.time) -> float:
    """Convert a clock time to decimal hours.

    Args:
        value: ClockTime, or a ``datetime.time`` (read at millisecond precision)

    Returns:
        Decimal hours
    """
    if isinstance(value, datetime.time):
        value = ClockTime.from_time(value)
    return angle_to_decimal(Angle(value.hours, value.minutes, value.seconds))


def decimal_to_clock_time(decimal: float) -> ClockTime:
    """Convert decimal hours to a clock time.

    Seconds keep millisecond precision. The sign of ``decimal`` is dropped.
    """
    angle = decimal_to_angle(decimal)
    fraction, whole = math.modf(angle.seconds)
    milliseconds = math.trunc(round(1000 * fraction, 6))
    seconds = round(whole + milliseconds / 1000, 3)
    return ClockTime(angle.degrees, angle.minutes, seconds)
