import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .angle import ClockTime


class Frame(Enum):
    EQUATORIAL = "equatorial"
    HORIZON = "horizon"


@dataclass(frozen=True)
class LatLng:
    """Observer position on Earth in decimal degrees (west longitudes negative)."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class EquatorialCoordinates:
    """Fixed position on the celestial sphere.

    Right ascension is measured from the First Point of Aries, declination
    from the celestial equator (decimal degrees).
    """

    frame: ClassVar[Frame] = Frame.EQUATORIAL

    right_ascension: ClockTime
    declination: float

    def __str__(self) -> str:
        from ..angles.conversion import decimal_to_angle

        return (
            f"EquatorialCoordinates ra={self.right_ascension} "
            f"dec={decimal_to_angle(self.declination)}"
        )


@dataclass(frozen=True)
class HorizonCoordinates:
    """Position in an observer's local sky; only valid for one place and instant."""

    frame: ClassVar[Frame] = Frame.HORIZON

    altitude: float
    azimuth: float

    def is_close(
        self, other: "HorizonCoordinates", rel_tol: float = 1e-9, abs_tol: float = 0.0
    ) -> bool:
        return math.isclose(
            self.altitude, other.altitude, rel_tol=rel_tol, abs_tol=abs_tol
        ) and math.isclose(
            self.azimuth, other.azimuth, rel_tol=rel_tol, abs_tol=abs_tol
        )

    def __str__(self) -> str:
        from ..angles.conversion import decimal_to_angle

        return (
            f"HorizonCoordinates alt={decimal_to_angle(self.altitude)} "
            f"az={decimal_to_angle(self.azimuth)}"
        )
