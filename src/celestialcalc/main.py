import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from . import __version__
from .angles.conversion import decimal_to_clock_time
from .catalog.loader import load_catalog
from .errors import CelestialCalcError, TimeParseError, handle_error
from .metadata.embedder import embed_metadata
from .models import ChartInfo, LatLng
from .renderer.starmap import ChartConfig, project_stars, render_starmap
from .sidereal.converter import (
    local_civilian_to_sidereal_time,
    local_to_universal_time,
    localize,
)

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Compute local sidereal time and render a star chart for an observer."
    )
    parser.add_argument(
        "--when",
        type=str,
        required=True,
        help="Local civil date-time, 'YYYY-MM-DD HH:MM' or ISO-8601",
    )
    parser.add_argument(
        "--timezone",
        type=str,
        default="UTC",
        help="IANA time zone of --when (default: UTC)",
    )
    parser.add_argument(
        "--lat", type=float, required=True, help="Observer latitude in degrees"
    )
    parser.add_argument(
        "--lng",
        type=float,
        required=True,
        help="Observer longitude in degrees (west negative)",
    )
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="JSON star catalog (default: bundled bright star catalog)",
    )
    parser.add_argument(
        "--limiting-magnitude",
        type=float,
        default=6.5,
        help="Faintest magnitude to draw (default 6.5)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=800,
        help="Chart width and height in pixels (default 800)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output PNG file path (default: output/starmap-YYYYMMDD-HHMM.png)",
    )
    parser.add_argument(
        "--lst-only",
        action="store_true",
        help="Print the local sidereal time and exit without rendering",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug information to stderr",
    )
    return parser.parse_args(argv)


def parse_local_time(when: str) -> datetime:
    """Parse a naive local date-time string.

    Raises:
        TimeParseError: If ``when`` matches neither accepted format
    """
    try:
        return datetime.strptime(when, "%Y-%m-%d %H:%M")
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(when)
    except ValueError:
        raise TimeParseError(when)


def validate_position(position: LatLng) -> None:
    """Reject positions outside latitude [-90, 90] / longitude [-180, 180]."""
    if not (-90 <= position.latitude <= 90):
        raise CelestialCalcError(
            f"Latitude {position.latitude}° outside valid range [-90, 90]",
            suggestions=["Pass --lat in decimal degrees, south negative"],
        )
    if not (-180 <= position.longitude <= 180):
        raise CelestialCalcError(
            f"Longitude {position.longitude}° outside valid range [-180, 180]",
            suggestions=["Pass --lng in decimal degrees, west negative"],
        )


def render_chart(
    when: str,
    tz_name: str,
    latitude: float,
    longitude: float,
    catalog_path: str | None = None,
    limiting_magnitude: float = 6.5,
    size: int = 800,
    output_path: str | None = None,
    lst_only: bool = False,
) -> int:
    """Compute LST and render a star chart PNG with embedded metadata.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        position = LatLng(latitude, longitude)
        validate_position(position)

        local_dt = parse_local_time(when)
        if local_dt.tzinfo is None:
            local_dt = localize(local_dt, tz_name)

        logger.debug("Observer at %s, local time %s", position, local_dt.isoformat())
        lst = local_civilian_to_sidereal_time(local_dt, position.longitude)
        print(f"Local sidereal time: {decimal_to_clock_time(lst)} ({lst:.6f} h)")
        if lst_only:
            return 0

        stars = load_catalog(catalog_path)
        config = ChartConfig(size=size, limiting_magnitude=limiting_magnitude)
        sky = project_stars(
            stars, local_dt, position, limiting_magnitude=config.limiting_magnitude
        )
        print(f"Rendering {len(sky)} stars above the horizon")

        image_array = render_starmap(sky, config)

        if output_path is None:
            output_path = f"output/starmap-{local_dt.strftime('%Y%m%d-%H%M')}.png"

        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        chart = ChartInfo(
            local_time=local_dt.isoformat(),
            utc_time=local_to_universal_time(local_dt).isoformat(),
            latitude=position.latitude,
            longitude=position.longitude,
            local_sidereal_time=lst,
            star_count=len(sky),
            renderer_id=f"celestialcalc-{__version__}",
        )
        embed_metadata(image_array, chart, str(output_file))
        print(f"Chart saved to: {output_file}")
        return 0

    except TimeParseError as e:
        return handle_error(e, "parsing local time")
    except CelestialCalcError as e:
        return handle_error(e)
    except Exception as e:
        return handle_error(e, "rendering star chart")


def main(argv=None):
    """CLI entry point."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    exit_code = render_chart(
        when=args.when,
        tz_name=args.timezone,
        latitude=args.lat,
        longitude=args.lng,
        catalog_path=args.catalog,
        limiting_magnitude=args.limiting_magnitude,
        size=args.size,
        output_path=args.output,
        lst_only=args.lst_only,
    )

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
