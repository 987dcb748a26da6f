"""Star chart renderer: projects a catalog for an observer and draws it with Pillow."""

import datetime
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
from PIL import Image, ImageDraw

from ..angles.conversion import clock_time_to_decimal
from ..coordinates.transform import equatorial_to_horizon_array
from ..models import Frame, LatLng, Star
from ..projection.projector import stereographic_projection_array
from ..sidereal.converter import local_civilian_to_sidereal_time

logger = logging.getLogger(__name__)

CARDINAL_POINTS = (("N", 0.0, 1.0), ("S", 0.0, -1.0), ("W", 1.0, 0.0), ("E", -1.0, 0.0))


@dataclass(frozen=True)
class MagnitudeEffect:
    """Power-law mapping from apparent magnitude to a marker property.

    effect(m) = minimum + factor * (1 - (m - min_magnitude) / (max_magnitude - min_magnitude)) ** exponent
    """

    minimum: float
    factor: float
    exponent: float
    min_magnitude: float = -2.0
    max_magnitude: float = 8.0

    def __post_init__(self):
        if self.max_magnitude <= self.min_magnitude:
            raise ValueError("max_magnitude must be greater than min_magnitude")

    def __call__(self, magnitude):
        span = self.max_magnitude - self.min_magnitude
        base = 1 - (np.asarray(magnitude, dtype=np.float64) - self.min_magnitude) / span
        # Stars fainter than max_magnitude would raise a negative base to a real power.
        return self.minimum + self.factor * np.clip(base, 0.0, None) ** self.exponent


@dataclass(frozen=True)
class ChartConfig:
    size: int = 800
    background_color: str = "#222222"
    star_color: str = "#ffffff"
    outline_color: str = "#191919"
    cardinal_color: str = "#555555"
    cardinal_offset: float = 1.05
    margin: float = 0.1
    size_effect: MagnitudeEffect = field(
        default_factory=lambda: MagnitudeEffect(0.5, 3, 4)
    )
    alpha_effect: MagnitudeEffect = field(
        default_factory=lambda: MagnitudeEffect(0, 5, 4)
    )
    limiting_magnitude: float = 6.5

    def __post_init__(self):
        if self.size < 64:
            raise ValueError("Chart size must be at least 64 pixels")
        if not 0.0 <= self.margin < 0.5:
            raise ValueError("Margin must be in [0, 0.5)")
        if self.cardinal_offset < 1.0:
            raise ValueError("Cardinal offset must place labels outside the horizon")


@dataclass(frozen=True)
class ProjectedSky:
    """Stars above the horizon, projected onto the chart plane."""

    when: datetime.datetime
    position: LatLng
    local_sidereal_time: float
    x: np.ndarray
    y: np.ndarray
    altitude: np.ndarray
    azimuth: np.ndarray
    magnitude: np.ndarray

    def __len__(self) -> int:
        return len(self.magnitude)


def project_stars(
    stars: Sequence[Star],
    local_civilian_date: datetime.datetime,
    position: LatLng,
    limiting_magnitude: float | None = None,
) -> ProjectedSky:
    """Transform stars to the observer's horizon frame, keep the visible ones, and project them.

    Args:
        stars: Stars in either coordinate frame
        local_civilian_date: Timezone-aware local civil date-time
        position: Observer latitude/longitude
        limiting_magnitude: Optional faintest magnitude to keep

    Returns:
        ProjectedSky for stars with altitude >= 0
    """
    lst = local_civilian_to_sidereal_time(local_civilian_date, position.longitude)

    ra_hours, dec_deg, eq_mag = [], [], []
    alt_list, az_list, hz_mag = [], [], []
    for star in stars:
        if star.frame is Frame.EQUATORIAL:
            ra_hours.append(clock_time_to_decimal(star.coordinates.right_ascension))
            dec_deg.append(star.coordinates.declination)
            eq_mag.append(star.magnitude)
        elif star.frame is Frame.HORIZON:
            alt_list.append(star.coordinates.altitude)
            az_list.append(star.coordinates.azimuth)
            hz_mag.append(star.magnitude)
        else:
            raise ValueError(f"Unknown coordinate frame: {star.frame}")

    eq_alt, eq_az = equatorial_to_horizon_array(
        np.array(ra_hours, dtype=np.float64),
        np.array(dec_deg, dtype=np.float64),
        lst,
        position.latitude,
    )
    altitude = np.concatenate([eq_alt, np.array(alt_list, dtype=np.float64)])
    azimuth = np.concatenate([eq_az, np.array(az_list, dtype=np.float64)])
    magnitude = np.array(eq_mag + hz_mag, dtype=np.float64)

    mask = altitude >= 0
    if limiting_magnitude is not None:
        mask &= magnitude <= limiting_magnitude

    x, y = stereographic_projection_array(altitude[mask], azimuth[mask])
    logger.debug(
        "Projected %d of %d stars (LST %.6f h)", int(mask.sum()), len(stars), lst
    )

    return ProjectedSky(
        when=local_civilian_date,
        position=position,
        local_sidereal_time=lst,
        x=x,
        y=y,
        altitude=altitude[mask],
        azimuth=azimuth[mask],
        magnitude=magnitude[mask],
    )


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    color = color.lstrip("#")
    if len(color) != 6:
        raise ValueError(f"Expected a #rrggbb color, got '#{color}'")
    return (int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16))


class StarChartRenderer:
    """Draws a ProjectedSky as a circular star chart."""

    def __init__(self, config: ChartConfig | None = None):
        self.config = config or ChartConfig()
        self.center = self.config.size / 2.0
        self.radius = self.center * (1.0 - 2.0 * self.config.margin)

    def to_pixels(self, x: np.ndarray, y: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """Map chart-plane coordinates (horizon on the unit circle) to pixel coordinates."""
        px = self.center + np.asarray(x) * self.radius
        py = self.center - np.asarray(y) * self.radius
        return px, py

    def render(self, sky: ProjectedSky) -> np.ndarray:
        """Render the chart.

        Returns:
            8-bit RGB image array with shape (size, size, 3)
        """
        config = self.config
        image = Image.new(
            "RGB", (config.size, config.size), _hex_to_rgb(config.background_color)
        )
        draw = ImageDraw.Draw(image, "RGBA")

        self._draw_outline(draw)
        self._draw_stars(draw, sky)
        self._draw_cardinal_points(draw)

        return np.asarray(image, dtype=np.uint8)

    def _draw_outline(self, draw: ImageDraw.ImageDraw) -> None:
        c, r = self.center, self.radius
        draw.ellipse(
            (c - r, c - r, c + r, c + r),
            outline=_hex_to_rgb(self.config.outline_color),
            width=max(1, self.config.size // 400),
        )

    def _draw_stars(self, draw: ImageDraw.ImageDraw, sky: ProjectedSky) -> None:
        if len(sky) == 0:
            return

        scale = self.config.size / 600.0
        sizes = np.maximum(self.config.size_effect(sky.magnitude) * scale, 0.5)
        alphas = np.clip(self.config.alpha_effect(sky.magnitude), 0.0, 1.0)
        px, py = self.to_pixels(sky.x, sky.y)
        red, green, blue = _hex_to_rgb(self.config.star_color)

        for cx, cy, radius, alpha in zip(px, py, sizes, alphas):
            if not (np.isfinite(cx) and np.isfinite(cy)):
                continue
            draw.ellipse(
                (cx - radius, cy - radius, cx + radius, cy + radius),
                fill=(red, green, blue, int(round(255 * alpha))),
            )

    def _draw_cardinal_points(self, draw: ImageDraw.ImageDraw) -> None:
        color = _hex_to_rgb(self.config.cardinal_color)
        offset = self.config.cardinal_offset
        for label, x, y in CARDINAL_POINTS:
            px, py = self.to_pixels(x * offset, y * offset)
            left, top, right, bottom = draw.textbbox((0, 0), label)
            draw.text(
                (float(px) - (right - left) / 2, float(py) - (bottom - top) / 2),
                label,
                fill=color,
            )


def render_starmap(sky: ProjectedSky, config: ChartConfig | None = None) -> np.ndarray:
    """Render a projected sky to an 8-bit RGB image array."""
    return StarChartRenderer(config).render(sky)
