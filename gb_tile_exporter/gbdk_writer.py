#!/usr/bin/env python3
"""
GBDK-2020 source writer
Renders an encoded image as a C header and a C source file
"""

from pathlib import Path
from typing import Tuple

from .constants import HEADER_EXTENSION, SOURCE_EXTENSION
from .logging_config import get_logger
from .models import TileExportResult
from .security_utils import validate_output_dir
from .utils.validation import ValidationError, Validators

logger = get_logger("gbdk_writer")

SUMMARY_TEMPLATE = """\
/**
 * @file  {file_name}
 * @brief {name}, exported by gb-tile-exporter for use with GBDK-2020 - {part}.
 *
 * Unique tiles  : {unique_tiles}
 * Total tiles   : {total_tiles}
 * Size (tiles)  : {tile_width}x{tile_height}
 * Size (pixels) : {pixel_width}x{pixel_height}
 * Bank          : {bank}
 */
"""

HEADER_TEMPLATE = """\
{summary}
#pragma once

{includes}

// CONSTANTS ///////////////////////////////////////////////////////////////////

#define GAME_BACKGROUNDS_{upper}_TILES {unique_tiles}U /**< How many unique tiles this background has. */

#define GAME_BACKGROUNDS_{upper}_SIZE_X {tile_width}U /**< Width of this background, in 8x8 tiles. */
#define GAME_BACKGROUNDS_{upper}_SIZE_Y {tile_height}U /**< Height of this background, in 8x8 tiles. */

/** {name} (data), exported by gb-tile-exporter for use with GBDK-2020.
 */
extern const unsigned char BackgroundData{name}[];

/** {name} (map), exported by gb-tile-exporter for use with GBDK-2020.
 */
extern const unsigned char BackgroundMap{name}[];
"""

SOURCE_TEMPLATE = """\
{summary}
{bank_pragma}#include "{header_name}"

{includes}

// CONSTANTS ///////////////////////////////////////////////////////////////////

const unsigned char BackgroundData{name}[] =
{{
{tile_data}
}};

const unsigned char BackgroundMap{name}[] =
{{
{tilemap}
}};
"""


def _summary(result: TileExportResult, name: str, file_name: str,
             part: str, bank: int) -> str:
    return SUMMARY_TEMPLATE.format(
        file_name=file_name,
        name=name,
        part=part,
        unique_tiles=result.unique_tile_count,
        total_tiles=result.total_tile_count,
        tile_width=result.tile_width,
        tile_height=result.tile_height,
        pixel_width=result.pixel_width,
        pixel_height=result.pixel_height,
        bank=bank,
    )


def _check_params(name: str, bank: int):
    valid, error = Validators.validate_asset_name(name)
    if not valid:
        raise ValidationError(error)
    valid, error = Validators.validate_bank(bank)
    if not valid:
        raise ValidationError(error)


def format_tile_data(result: TileExportResult) -> str:
    """One unique tile per line, 16 hex bytes each"""
    lines = []
    for tile in result.tiles:
        lines.append("\t" + ", ".join(f"0x{byte:02X}" for byte in tile.to_bytes()))
    return ",\n".join(lines)


def format_tilemap(result: TileExportResult) -> str:
    """The tilemap laid out with as many rows and columns as the image has tiles"""
    lines = []
    for row in result.tilemap_rows():
        lines.append("\t" + ", ".join(f"0x{index:02X}" for index in row))
    return ",\n".join(lines)


def render_header(result: TileExportResult, name: str, bank: int = 0) -> str:
    """
    Render the .h file of an asset.

    Raises:
        ValidationError: If the asset name or bank are invalid
    """
    _check_params(name, bank)
    upper = name.upper()
    file_name = f"{name.lower()}{HEADER_EXTENSION}"

    if bank == 0:
        includes = "#include <stdint.h>"
    else:
        includes = f"#include <gb/gb.h>\n\nBANKREF_EXTERN(GAME_BACKGROUNDS_{upper})"

    return HEADER_TEMPLATE.format(
        summary=_summary(result, name, file_name, "header", bank),
        includes=includes,
        upper=upper,
        name=name,
        unique_tiles=result.unique_tile_count,
        tile_width=result.tile_width,
        tile_height=result.tile_height,
    )


def render_source(result: TileExportResult, name: str, bank: int = 0) -> str:
    """
    Render the .c file of an asset.

    Raises:
        ValidationError: If the asset name or bank are invalid
    """
    _check_params(name, bank)
    upper = name.upper()
    file_name = f"{name.lower()}{SOURCE_EXTENSION}"

    if bank == 0:
        bank_pragma = ""
        includes = "#include <stdint.h>"
    else:
        bank_pragma = f"#pragma bank {bank}\n\n"
        includes = f"#include <gb/gb.h>\n\nBANKREF(GAME_BACKGROUNDS_{upper})"

    return SOURCE_TEMPLATE.format(
        summary=_summary(result, name, file_name, "data", bank),
        bank_pragma=bank_pragma,
        header_name=f"{name.lower()}{HEADER_EXTENSION}",
        includes=includes,
        name=name,
        tile_data=format_tile_data(result),
        tilemap=format_tilemap(result),
    )


def write_gbdk_sources(result: TileExportResult, name: str, output_dir,
                       bank: int = 0) -> Tuple[Path, Path]:
    """
    Write <name>.h and <name>.c into output_dir.

    Returns:
        Tuple of (header_path, source_path)

    Raises:
        ValidationError: If the asset name or bank are invalid
        SecurityError: If the output directory is unsafe or missing
        OSError: If a file can not be written
    """
    header_text = render_header(result, name, bank)
    source_text = render_source(result, name, bank)

    directory = Path(validate_output_dir(output_dir))
    header_path = directory / f"{name.lower()}{HEADER_EXTENSION}"
    source_path = directory / f"{name.lower()}{SOURCE_EXTENSION}"

    header_path.write_text(header_text, encoding="utf-8")
    logger.info(f"Wrote {header_path}")
    source_path.write_text(source_text, encoding="utf-8")
    logger.info(f"Wrote {source_path}")

    return header_path, source_path
