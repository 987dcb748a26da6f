"""Equatorial to horizon coordinate transformation.

Pipeline: civil time + longitude -> LST -> hour angle -> altitude/azimuth
"""

import datetime

import numpy as np

from ..angles.conversion import clock_time_to_decimal
from ..models import (
    ClockTime,
    EquatorialCoordinates,
    Frame,
    HorizonCoordinates,
    LatLng,
    Star,
)
from ..sidereal.converter import local_civilian_to_sidereal_time


def _exact_at_right_angles(degrees: np.ndarray, values: np.ndarray) -> np.ndarray:
    return np.where(np.mod(degrees, 90.0) == 0.0, np.round(values), values)


def sind(degrees):
    """Sine of an angle in degrees, exact at multiples of 90°."""
    x = np.asarray(degrees, dtype=np.float64)
    return _exact_at_right_angles(x, np.sin(np.radians(x)))[()]


def cosd(degrees):
    """Cosine of an angle in degrees, exact at multiples of 90°."""
    x = np.asarray(degrees, dtype=np.float64)
    return _exact_at_right_angles(x, np.cos(np.radians(x)))[()]


def _clip_finite(values: np.ndarray) -> np.ndarray:
    return np.where(np.isfinite(values), np.clip(values, -1.0, 1.0), values)


def _altitude_azimuth(declination, hour_angle, latitude):
    """Vectorized core of the hour angle to horizon transformation.

    At the poles ``cos(latitude) * cos(altitude)`` is zero and the azimuth
    comes out NaN; this is propagated, never raised.
    """
    h_deg = 15 * np.asarray(hour_angle, dtype=np.float64)

    sin_h = sind(declination) * sind(latitude) + cosd(declination) * cosd(
        latitude
    ) * cosd(h_deg)
    with np.errstate(divide="ignore", invalid="ignore"):
        # Rounding can land a hair outside [-1, 1]; singular values stay non-finite.
        sin_h = _clip_finite(sin_h)
        altitude = np.degrees(np.arcsin(sin_h))

        cos_az = (sind(declination) - sind(latitude) * sin_h) / (
            cosd(latitude) * cosd(altitude)
        )
        azimuth = np.degrees(np.arccos(_clip_finite(cos_az)))

        # arccos only covers [0, 180]; west of the meridian the azimuth is mirrored.
        azimuth = np.where(sind(h_deg) > 0, 360 - azimuth, azimuth)
        azimuth = np.mod(azimuth, 360.0)

    return altitude, azimuth


def hour_angle_to_horizon(
    declination: float,
    hour_angle: float | ClockTime | datetime.time,
    latitude: float,
) -> HorizonCoordinates:
    """Find horizon coordinates from declination, hour angle and latitude.

    Args:
        declination: Declination in decimal degrees
        hour_angle: Hour angle in decimal hours, or as a clock time
        latitude: Observer latitude in decimal degrees

    Returns:
        HorizonCoordinates with azimuth in [0, 360)
    """
    if isinstance(hour_angle, (ClockTime, datetime.time)):
        hour_angle = clock_time_to_decimal(hour_angle)

    altitude, azimuth = _altitude_azimuth(declination, hour_angle, latitude)
    return HorizonCoordinates(altitude=float(altitude), azimuth=float(azimuth))


def equatorial_to_horizon(
    coordinates: EquatorialCoordinates,
    local_civilian_date: datetime.datetime,
    position: LatLng,
) -> HorizonCoordinates:
    """Find horizon coordinates for an object seen from a place at a local civil time.

    Args:
        coordinates: Object's equatorial coordinates
        local_civilian_date: Timezone-aware local civil date-time
        position: Observer latitude/longitude

    Returns:
        HorizonCoordinates for the observer at that instant

    Raises:
        TimeZoneError: If ``local_civilian_date`` has no UTC offset
    """
    lst = local_civilian_to_sidereal_time(local_civilian_date, position.longitude)
    hour_angle = lst - clock_time_to_decimal(coordinates.right_ascension)
    if hour_angle < 0:
        hour_angle += 24

    return hour_angle_to_horizon(coordinates.declination, hour_angle, position.latitude)


def equatorial_to_horizon_array(
    ra_hours: np.ndarray,
    dec_deg: np.ndarray,
    local_sidereal_time: float,
    latitude: float,
) -> tuple[np.ndarray, np.ndarray]:
    """Bulk-transform right ascension/declination arrays to altitude/azimuth.

    Args:
        ra_hours: Right ascensions in decimal hours
        dec_deg: Declinations in decimal degrees
        local_sidereal_time: LST in decimal hours, shared by every object
        latitude: Observer latitude in decimal degrees

    Returns:
        (altitude, azimuth) arrays in degrees
    """
    hour_angle = local_sidereal_time - np.asarray(ra_hours, dtype=np.float64)
    hour_angle = np.where(hour_angle < 0, hour_angle + 24, hour_angle)
    altitude, azimuth = _altitude_azimuth(
        np.asarray(dec_deg, dtype=np.float64), hour_angle, latitude
    )
    return np.atleast_1d(altitude), np.atleast_1d(azimuth)


def star_to_horizon(
    star: Star,
    local_civilian_date: datetime.datetime,
    position: LatLng,
) -> Star:
    """Return ``star`` with its coordinates in the observer's horizon frame."""
    if star.frame is Frame.HORIZON:
        return star
    if star.frame is Frame.EQUATORIAL:
        horizon = equatorial_to_horizon(
            star.coordinates, local_civilian_date, position
        )
        return Star(coordinates=horizon, magnitude=star.magnitude)
    raise ValueError(f"Unknown coordinate frame: {star.frame}")
