#!/usr/bin/env python3
"""
Export workflow
PNG file -> pixel grid -> encoded tiles -> GBDK-2020 sources
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .encoder import encode, tile_budget_message
from .gbdk_writer import write_gbdk_sources
from .image_reader import read_indexed_png
from .logging_config import get_logger
from .models import TileExportResult
from .security_utils import SecurityError
from .utils.validation import InputSanitizer, ValidationError, Validators

logger = get_logger("exporter")


class ExportError(RuntimeError):
    """Raised when an image can not be read or its sources can not be written"""
    pass


@dataclass(frozen=True)
class ExportReport:
    """What one export produced"""

    asset_name: str
    bank: int
    header_path: Path
    source_path: Path
    result: TileExportResult

    @property
    def advisory(self) -> Optional[str]:
        """Tile budget warning, or None when the tiles fit in video memory"""
        if self.result.exceeds_tile_budget:
            return tile_budget_message(self.result.unique_tile_count)
        return None


def default_asset_name(png_file) -> str:
    """Asset name derived from the file name, first letter capitalized"""
    return InputSanitizer.sanitize_asset_name(Path(png_file).stem)


def export_png(png_file, output_dir, asset_name: Optional[str] = None,
               bank: int = 0) -> ExportReport:
    """
    Export an indexed PNG as GBDK-2020 background data.

    Args:
        png_file: 4-color indexed PNG, 8-256 pixels per side, multiple of 8
        output_dir: Existing directory for the .h and .c files
        asset_name: C identifier base name (defaults to the file name)
        bank: ROM bank number, 0 for the default bank

    Returns:
        ExportReport with the written paths and the encoded result

    Raises:
        ValidationError: If the image or the parameters are invalid
        SecurityError: If a path is unsafe
        ExportError: If reading or writing fails
    """
    if asset_name is None:
        asset_name = default_asset_name(png_file)

    valid, error = Validators.validate_asset_name(asset_name)
    if not valid:
        raise ValidationError(error)
    valid, error = Validators.validate_bank(bank)
    if not valid:
        raise ValidationError(error)

    try:
        grid = read_indexed_png(png_file)
        result = encode(grid)
        header_path, source_path = write_gbdk_sources(
            result, asset_name, output_dir, bank
        )
    except (ValidationError, SecurityError):
        # Re-raise validation and security errors as-is
        raise
    except OSError as e:
        # File operations and PIL/Image errors
        raise ExportError(f"Error exporting {png_file}: {e}") from e

    logger.info(
        f"Exported {asset_name}: {result.unique_tile_count} unique tiles "
        f"of {result.total_tile_count} ({result.tile_width}x{result.tile_height} tiles)"
    )
    return ExportReport(asset_name, bank, header_path, source_path, result)
