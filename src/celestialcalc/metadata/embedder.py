"""PNG metadata embedding and extraction for star charts."""

from typing import Dict, Optional

import numpy as np
from PIL import Image, PngImagePlugin

from ..models.chart import ChartInfo


def embed_metadata(image_array: np.ndarray, chart: ChartInfo, output_path: str) -> None:
    """Save an 8-bit PNG image with embedded chart metadata.

    Args:
        image_array: 8-bit RGB image array with shape (height, width, 3)
        chart: Chart metadata object
        output_path: Path where to save the PNG file
    """
    if image_array.dtype != np.uint8:
        raise ValueError("Image array must be uint8 for 8-bit PNG output")

    if len(image_array.shape) != 3 or image_array.shape[2] != 3:
        raise ValueError("Image array must have shape (height, width, 3)")

    png_info = PngImagePlugin.PngInfo()

    metadata_dict = _chart_to_metadata_dict(chart)
    for key, value in metadata_dict.items():
        png_info.add_text(key, str(value))

    image = Image.fromarray(image_array)
    image.save(output_path, "PNG", pnginfo=png_info)


def _chart_to_metadata_dict(chart: ChartInfo) -> Dict[str, str]:
    """Convert ChartInfo dataclass to metadata dictionary.

    Args:
        chart: Chart metadata object

    Returns:
        Dictionary with string values for PNG text chunks
    """
    return {
        "local_time": chart.local_time,
        "utc_time": chart.utc_time,
        "latitude": str(chart.latitude),
        "longitude": str(chart.longitude),
        "local_sidereal_time": repr(chart.local_sidereal_time),
        "star_count": str(chart.star_count),
        "renderer_id": chart.renderer_id,
    }


def extract_metadata(image_path: str) -> Optional[Dict[str, str]]:
    """Extract metadata from a PNG file.

    Args:
        image_path: Path to PNG file

    Returns:
        Dictionary of metadata key-value pairs, or None if no metadata found
    """
    try:
        image = Image.open(image_path)
    except FileNotFoundError:
        return None

    metadata = {}
    if hasattr(image, "text"):
        for key, value in image.text.items():
            metadata[key] = value

    return metadata if metadata else None
