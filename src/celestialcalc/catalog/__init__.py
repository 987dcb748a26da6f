from .loader import (
    filter_by_magnitude,
    load_catalog,
    parse_catalog,
    parse_declination,
    parse_right_ascension,
    parse_star,
)

__all__ = [
    "parse_right_ascension",
    "parse_declination",
    "parse_star",
    "parse_catalog",
    "load_catalog",
    "filter_by_magnitude",
]
