"""Positional astronomy: angles, sidereal time, horizon coordinates and star charts."""

__version__ = "0.1.0"

from .angles.conversion import (
    angle_to_decimal,
    clock_time_to_decimal,
    decimal_to_angle,
    decimal_to_clock_time,
)
from .coordinates.transform import (
    equatorial_to_horizon,
    equatorial_to_horizon_array,
    hour_angle_to_horizon,
    star_to_horizon,
)
from .models import (
    Angle,
    ClockTime,
    EquatorialCoordinates,
    Frame,
    HorizonCoordinates,
    LatLng,
    Star,
)
from .projection.projector import cartesian_projection, stereographic_projection
from .sidereal.converter import (
    local_civilian_to_sidereal_time,
    local_to_universal_time,
    localize,
    prime_to_local_sidereal_time,
    solar_to_prime_sidereal_time,
)

__all__ = [
    "__version__",
    "Angle",
    "ClockTime",
    "EquatorialCoordinates",
    "Frame",
    "HorizonCoordinates",
    "LatLng",
    "Star",
    "angle_to_decimal",
    "decimal_to_angle",
    "clock_time_to_decimal",
    "decimal_to_clock_time",
    "localize",
    "local_to_universal_time",
    "solar_to_prime_sidereal_time",
    "prime_to_local_sidereal_time",
    "local_civilian_to_sidereal_time",
    "hour_angle_to_horizon",
    "equatorial_to_horizon",
    "equatorial_to_horizon_array",
    "star_to_horizon",
    "cartesian_projection",
    "stereographic_projection",
]
