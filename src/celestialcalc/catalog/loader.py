"""Star catalog loading.

Records follow the Bright Star Catalogue JSON layout::

    {"RA": "06:45:08.9", "DEC": "-16:42:58", "MAG": "-1.46"}

Loading is all-or-nothing: the first malformed record aborts the whole load.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from importlib import resources
from pathlib import Path
from typing import Optional

from ..angles.conversion import angle_to_decimal
from ..errors import CatalogNotFoundError, CatalogParseError
from ..models import Angle, ClockTime, EquatorialCoordinates, Star

logger = logging.getLogger(__name__)

BUNDLED_CATALOG = "bright_stars.json"


def _split_sexagesimal(value: str, field: str) -> tuple[float, float, float]:
    parts = value.strip().split(":")
    if len(parts) != 3:
        raise CatalogParseError(field, value)
    try:
        first, minutes, seconds = (float(p) for p in parts)
    except ValueError:
        raise CatalogParseError(field, value)
    return first, minutes, seconds


def parse_right_ascension(value: str) -> ClockTime:
    """Parse an "hh:mm:ss[.s]" right ascension, keeping milliseconds."""
    hours, minutes, seconds = _split_sexagesimal(value, "RA")
    return ClockTime(int(hours), int(minutes), round(seconds, 3))


def parse_declination(value: str) -> float:
    """Parse a "±dd:mm:ss[.s]" declination to decimal degrees.

    The sign applies to the whole value, so "-00:17:57" is negative even
    though its degree field is zero.
    """
    degrees, minutes, seconds = _split_sexagesimal(value, "DEC")
    is_negative = value.strip().startswith("-")
    return angle_to_decimal(
        Angle(int(abs(degrees)), int(minutes), seconds, is_negative=is_negative)
    )


def parse_star(record: Mapping) -> Star:
    """Build an equatorial Star from a catalog record with RA, DEC and MAG keys."""
    for key in ("RA", "DEC", "MAG"):
        if key not in record:
            raise CatalogParseError(key, None)

    right_ascension = parse_right_ascension(str(record["RA"]))
    declination = parse_declination(str(record["DEC"]))
    try:
        magnitude = float(record["MAG"])
    except (TypeError, ValueError):
        raise CatalogParseError("MAG", record["MAG"])

    return Star(
        coordinates=EquatorialCoordinates(right_ascension, declination),
        magnitude=magnitude,
    )


def parse_catalog(records: Iterable[Mapping]) -> list[Star]:
    """Parse every record, failing on the first malformed one.

    Raises:
        CatalogParseError: With the index of the offending record
    """
    stars = []
    for index, record in enumerate(records):
        try:
            stars.append(parse_star(record))
        except CatalogParseError as e:
            raise CatalogParseError(e.field, e.value, index=index) from e
    return stars


def load_catalog(path: Optional[str | Path] = None) -> list[Star]:
    """Load a JSON star catalog.

    Args:
        path: Catalog file; the bundled bright star catalog when omitted

    Returns:
        Stars with equatorial coordinates, in file order

    Raises:
        CatalogNotFoundError: If ``path`` does not exist
        CatalogParseError: If the file is not a JSON array of valid records
    """
    if path is None:
        source = resources.files(__package__) / "data" / BUNDLED_CATALOG
        text = source.read_text(encoding="utf-8")
        name = BUNDLED_CATALOG
    else:
        catalog_path = Path(path)
        if not catalog_path.is_file():
            raise CatalogNotFoundError(str(catalog_path))
        text = catalog_path.read_text(encoding="utf-8")
        name = str(catalog_path)

    try:
        records = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogParseError("JSON", e.msg) from e
    if not isinstance(records, list):
        raise CatalogParseError("JSON", type(records).__name__)

    stars = parse_catalog(records)
    logger.debug("Loaded %d stars from %s", len(stars), name)
    return stars


def filter_by_magnitude(stars: Iterable[Star], limiting_magnitude: float) -> list[Star]:
    """Keep stars at least as bright as ``limiting_magnitude``."""
    return [star for star in stars if star.magnitude <= limiting_magnitude]
