#!/usr/bin/env python3
"""
Tile models
Encoded 2bpp tiles and the canonical/duplicate classification of tile positions
"""

from dataclasses import dataclass
from typing import Tuple, Union

from ..constants import PLANE_BYTE_MASK, ROWS_PER_TILE, ROW_WORD_MASK

# One 8x8 block of palette indices in row-major order
RawTile = Tuple[int, ...]


@dataclass(frozen=True)
class EncodedTile:
    """
    A tile in Game Boy 2bpp format: 8 row words of 16 bits.

    Two tiles are the same tile when all 8 row words are equal, so instances
    are hashable and can be used as dictionary keys.
    """

    rows: Tuple[int, ...]

    def __post_init__(self):
        if len(self.rows) != ROWS_PER_TILE:
            raise ValueError(f"Expected {ROWS_PER_TILE} rows, got {len(self.rows)}")
        for word in self.rows:
            if word & ~ROW_WORD_MASK:
                raise ValueError(f"Row word 0x{word:X} does not fit in 16 bits")

    def to_bytes(self) -> bytes:
        """The 16 bytes of this tile, upper byte of each row word first"""
        output = bytearray()
        for word in self.rows:
            output.append((word >> 8) & PLANE_BYTE_MASK)
            output.append(word & PLANE_BYTE_MASK)
        return bytes(output)


@dataclass(frozen=True)
class Canonical:
    """Tile position holding the first occurrence of its content"""

    index: int

    @property
    def is_duplicate(self) -> bool:
        return False


@dataclass(frozen=True)
class DuplicateOf:
    """Tile position whose content already appeared at an earlier position"""

    index: int

    @property
    def is_duplicate(self) -> bool:
        return True


TileSlot = Union[Canonical, DuplicateOf]
