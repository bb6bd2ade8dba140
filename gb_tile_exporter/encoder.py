#!/usr/bin/env python3
"""
Core tile encoder
Turns a validated pixel grid into a canonical tile table and a tilemap
"""

from .constants import VRAM_TILE_LIMIT, VRAM_TILE_LIMIT_HACK
from .logging_config import get_logger
from .models import PixelGrid, TileExportResult
from .tile_deduplicator import deduplicate_tiles
from .tile_utils import encode_tiles, extract_tiles

logger = get_logger("encoder")


def tile_budget_message(unique_tile_count: int) -> str:
    """Advisory text for images with more unique tiles than video memory holds"""
    return (
        f"This image has {unique_tile_count} unique tiles. "
        f"The Game Boy video memory can only fit up to {VRAM_TILE_LIMIT} at the same time "
        f"({VRAM_TILE_LIMIT_HACK} using a hack). It will probably give errors."
    )


def encode(grid: PixelGrid) -> TileExportResult:
    """
    Encode a pixel grid to Game Boy tiles.

    Every call works on its own containers; nothing is shared between calls.
    Going over the video memory tile budget is not an error: the result is
    still complete, exceeds_tile_budget is set and a warning is logged.

    Args:
        grid: Validated grid of palette indices

    Returns:
        TileExportResult with the unique tiles, the tilemap and metadata
    """
    raw_tiles = extract_tiles(grid)
    encoded_tiles = encode_tiles(raw_tiles)
    deduplicated = deduplicate_tiles(encoded_tiles)

    result = TileExportResult(
        tiles=deduplicated.tiles,
        tilemap=deduplicated.tilemap,
        slots=deduplicated.slots,
        tile_width=grid.tile_width,
        tile_height=grid.tile_height,
    )

    logger.debug(
        f"Encoded {grid.width}x{grid.height} image: {result.total_tile_count} tiles, "
        f"{result.unique_tile_count} unique"
    )

    if result.exceeds_tile_budget:
        logger.warning(tile_budget_message(result.unique_tile_count))

    return result
