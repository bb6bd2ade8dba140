#!/usr/bin/env python3
"""
Game Boy tile extraction and 2bpp encoding utilities
"""

from typing import List, Sequence

from .constants import (PIXEL_HIGH_BIT_MASK, PIXEL_LOW_BIT_MASK,
                        PIXELS_PER_TILE, TILE_HEIGHT, TILE_WIDTH)
from .models import EncodedTile, PixelGrid, RawTile


def extract_tile(grid: PixelGrid, tile_x: int, tile_y: int) -> RawTile:
    """
    Read one 8x8 block of the grid.

    Args:
        grid: Source pixel grid
        tile_x: Tile column (0 is leftmost)
        tile_y: Tile row (0 is topmost)

    Returns:
        Tuple of 64 palette indices in row-major order
    """
    left = tile_x * TILE_WIDTH
    top = tile_y * TILE_HEIGHT
    pixels = []
    for y in range(top, top + TILE_HEIGHT):
        pixels.extend(grid.rows[y][left:left + TILE_WIDTH])
    return tuple(pixels)


def extract_tiles(grid: PixelGrid) -> List[RawTile]:
    """
    Slice a grid into 8x8 tiles.

    Tiles come out in row-major tile order: the tile at (row, col) ends up at
    index row * tile_width + col.
    """
    return [
        extract_tile(grid, tile_x, tile_y)
        for tile_y in range(grid.tile_height)
        for tile_x in range(grid.tile_width)
    ]


def encode_2bpp_tile(tile_pixels: Sequence[int]) -> EncodedTile:
    """
    Encode an 8x8 tile to Game Boy 2bpp format.

    Each pixel row becomes one 16-bit word. The upper byte holds the low bit
    of every pixel and the lower byte holds the high bit; the leftmost pixel
    goes in bit 7 of both bytes.

    Args:
        tile_pixels: 64 palette indices (0-3) in row-major order

    Returns:
        The encoded tile

    Raises:
        ValueError: If tile_pixels doesn't contain exactly 64 values
    """
    if len(tile_pixels) != PIXELS_PER_TILE:
        raise ValueError(f"Expected {PIXELS_PER_TILE} pixels, got {len(tile_pixels)}")

    rows = []
    for y in range(TILE_HEIGHT):
        low_plane = 0
        high_plane = 0

        for x in range(TILE_WIDTH):
            pixel = tile_pixels[y * TILE_WIDTH + x]
            low_plane |= (pixel & PIXEL_LOW_BIT_MASK) << (7 - x)
            high_plane |= ((pixel & PIXEL_HIGH_BIT_MASK) >> 1) << (7 - x)

        rows.append((low_plane << 8) | high_plane)

    return EncodedTile(tuple(rows))


def encode_tiles(tiles: Sequence[Sequence[int]]) -> List[EncodedTile]:
    """Encode multiple raw tiles, keeping their order"""
    return [encode_2bpp_tile(tile) for tile in tiles]
