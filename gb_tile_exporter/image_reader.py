#!/usr/bin/env python3
"""
Read indexed PNG images into pixel grids
"""

from PIL import Image

from .constants import IMAGE_COLORS, MAX_PNG_FILE_SIZE
from .logging_config import get_logger
from .models import PixelGrid
from .security_utils import validate_file_path
from .utils.validation import ValidationError, Validators

logger = get_logger("image_reader")


def palette_color_count(img: Image.Image) -> int:
    """Number of entries in the image palette (0 if it has none)"""
    palette = img.getpalette()
    return len(palette) // 3 if palette else 0


def _check_mode_and_size(img: Image.Image):
    """Checks that only need the image header"""
    if img.mode != 'P':
        raise ValidationError(f"Image must be in indexed color mode (current: {img.mode})")

    errors = Validators.validate_image_dimensions(*img.size)
    if errors:
        raise ValidationError("; ".join(errors))


def image_to_pixel_grid(img: Image.Image) -> PixelGrid:
    """
    Convert an indexed PIL image to a pixel grid.

    Raises:
        ValidationError: If the image is not indexed, has the wrong size,
            has a palette of other than 4 colors or uses palette indices
            above 3
    """
    _check_mode_and_size(img)
    width, height = img.size

    colors = palette_color_count(img)
    if colors != IMAGE_COLORS:
        raise ValidationError(
            f"The image should be {IMAGE_COLORS}-color only "
            f"(palette has {colors} colors)"
        )

    _, highest_index = img.getextrema()
    if highest_index >= IMAGE_COLORS:
        raise ValidationError(
            f"The image should be {IMAGE_COLORS}-color only "
            f"(found palette index {highest_index})"
        )

    # One byte per pixel in mode P
    return PixelGrid.from_flat(width, height, img.tobytes())


def read_indexed_png(png_file) -> PixelGrid:
    """
    Load a 4-color indexed PNG file.

    Mode and size are checked from the header before any pixel data is
    decoded.

    Args:
        png_file: Path to the PNG file

    Returns:
        PixelGrid with the image palette indices

    Raises:
        SecurityError: If the path is unsafe or the file too large
        ValidationError: If the image can not be exported
        OSError: If the file can not be read or is not an image
    """
    png_file = validate_file_path(png_file, max_size=MAX_PNG_FILE_SIZE)

    try:
        with Image.open(png_file) as img:
            _check_mode_and_size(img)
            img.load()
            logger.debug(f"Loaded {png_file}: {img.size[0]}x{img.size[1]} mode {img.mode}")
            return image_to_pixel_grid(img)
    except Image.DecompressionBombError as e:
        raise ValidationError(f"Image is far too large to export: {e}") from e
