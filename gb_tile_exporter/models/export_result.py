#!/usr/bin/env python3
"""
Export result model
Everything the encoder hands over to an emitter
"""

from dataclasses import dataclass
from typing import Tuple

from ..constants import TILE_HEIGHT, TILE_WIDTH, VRAM_TILE_LIMIT
from .tile_models import EncodedTile, TileSlot


@dataclass(frozen=True)
class TileExportResult:
    """Canonical tile table, tilemap and metadata of one encoded image"""

    tiles: Tuple[EncodedTile, ...]
    tilemap: Tuple[int, ...]
    slots: Tuple[TileSlot, ...]
    tile_width: int
    tile_height: int

    @property
    def unique_tile_count(self) -> int:
        return len(self.tiles)

    @property
    def total_tile_count(self) -> int:
        return self.tile_width * self.tile_height

    @property
    def duplicate_count(self) -> int:
        return self.total_tile_count - self.unique_tile_count

    @property
    def pixel_width(self) -> int:
        return self.tile_width * TILE_WIDTH

    @property
    def pixel_height(self) -> int:
        return self.tile_height * TILE_HEIGHT

    @property
    def exceeds_tile_budget(self) -> bool:
        """True when the unique tiles will not all fit in video memory"""
        return self.unique_tile_count > VRAM_TILE_LIMIT

    def tile_data(self) -> bytes:
        """The canonical tile table as raw 2bpp bytes"""
        return b"".join(tile.to_bytes() for tile in self.tiles)

    def tilemap_rows(self):
        """Yield the tilemap one image row of tiles at a time"""
        for row in range(self.tile_height):
            start = row * self.tile_width
            yield self.tilemap[start:start + self.tile_width]

    def metadata(self) -> dict:
        return {
            "tile_width": self.tile_width,
            "tile_height": self.tile_height,
            "unique_tile_count": self.unique_tile_count,
            "total_tile_count": self.total_tile_count,
            "exceeds_tile_budget": self.exceeds_tile_budget,
        }
