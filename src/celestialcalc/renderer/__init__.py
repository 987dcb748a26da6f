from .starmap import (
    ChartConfig,
    MagnitudeEffect,
    ProjectedSky,
    StarChartRenderer,
    project_stars,
    render_starmap,
)

__all__ = [
    "ChartConfig",
    "MagnitudeEffect",
    "ProjectedSky",
    "StarChartRenderer",
    "project_stars",
    "render_starmap",
]
