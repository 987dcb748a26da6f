from .conversion import (
    angle_to_decimal,
    clock_time_to_decimal,
    decimal_to_angle,
    decimal_to_clock_time,
)

__all__ = [
    "angle_to_decimal",
    "decimal_to_angle",
    "clock_time_to_decimal",
    "decimal_to_clock_time",
]
