"""Projection of horizon coordinates onto the plane of a star chart.

The chart is centred on the zenith with the horizon on the unit circle.
East is on the left, as seen looking up from inside the celestial sphere.
"""

import numpy as np

from ..coordinates.transform import cosd, sind
from ..models import HorizonCoordinates


def cartesian_projection(hcoords: HorizonCoordinates) -> tuple[float, float, float]:
    """Project horizon coordinates to a unit vector (x east, y north, z zenith)."""
    h, az = hcoords.altitude, hcoords.azimuth
    x = cosd(h) * sind(az)
    y = cosd(h) * cosd(az)
    z = sind(h)
    return (float(x), float(y), float(z))


def stereographic_projection(hcoords: HorizonCoordinates) -> tuple[float, float]:
    """Project horizon coordinates to the chart plane, viewed from the nadir.

    The nadir itself (altitude -90°) has no image and yields non-finite values.
    """
    x_proj, y_proj = stereographic_projection_array(
        hcoords.altitude, hcoords.azimuth
    )
    return (float(x_proj[0]), float(y_proj[0]))


def stereographic_projection_array(
    alt_deg: np.ndarray, az_deg: np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    """Stereographic projection for arrays of altitude/azimuth in degrees.

    Returns:
        (x, y) arrays with the zenith at the origin and the horizon on the unit circle
    """
    alt = np.atleast_1d(np.asarray(alt_deg, dtype=np.float64))
    az = np.atleast_1d(np.asarray(az_deg, dtype=np.float64))

    x = cosd(alt) * sind(az)
    y = cosd(alt) * cosd(az)
    z = sind(alt)

    with np.errstate(divide="ignore", invalid="ignore"):
        x = x / (z + 1)
        y = y / (z + 1)

    # Mirror east/west.
    return -x, y
