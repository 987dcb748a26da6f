import datetime
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Angle:
    """Sexagesimal angle with the sign held apart from the magnitude fields.

    Keeping the sign in ``is_negative`` lets angles smaller than one degree
    be negative, e.g. -0°10'10''. Magnitude fields are not range-checked.
    """

    degrees: int
    minutes: int = 0
    seconds: float = 0.0
    is_negative: bool = False

    def __str__(self) -> str:
        sign = "-" if self.is_negative else ""
        return f"{sign}{self.degrees}°{self.minutes:02d}'{self.seconds:05.2f}''"


@dataclass(frozen=True)
class ClockTime:
    """Hours, minutes and seconds of a time of day or an hour angle."""

    hours: int
    minutes: int = 0
    seconds: float = 0.0

    @classmethod
    def from_time(cls, value: datetime.time) -> "ClockTime":
        milliseconds = value.microsecond // 1000
        return cls(value.hour, value.minute, value.second + 0.001 * milliseconds)

    def to_time(self) -> datetime.time:
        """Convert to ``datetime.time`` at millisecond precision.

        Raises:
            ValueError: If a field is outside the range ``datetime.time`` accepts
                (e.g. seconds rounded up to 60).
        """
        fraction, whole = math.modf(self.seconds)
        milliseconds = math.trunc(round(1000 * fraction, 6))
        return datetime.time(
            self.hours, self.minutes, int(whole), milliseconds * 1000
        )

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:06.3f}"
