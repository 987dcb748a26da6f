from .transform import (
    cosd,
    equatorial_to_horizon,
    equatorial_to_horizon_array,
    hour_angle_to_horizon,
    sind,
    star_to_horizon,
)

__all__ = [
    "sind",
    "cosd",
    "hour_angle_to_horizon",
    "equatorial_to_horizon",
    "equatorial_to_horizon_array",
    "star_to_horizon",
]
