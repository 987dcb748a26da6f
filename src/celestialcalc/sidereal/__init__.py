from .converter import (
    julian_day,
    local_civilian_to_sidereal_time,
    local_to_universal_time,
    localize,
    prime_to_local_sidereal_time,
    solar_to_prime_sidereal_time,
)

__all__ = [
    "julian_day",
    "localize",
    "local_to_universal_time",
    "solar_to_prime_sidereal_time",
    "prime_to_local_sidereal_time",
    "local_civilian_to_sidereal_time",
]
