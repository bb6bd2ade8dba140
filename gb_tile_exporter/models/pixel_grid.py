#!/usr/bin/env python3
"""
Pixel grid model
A validated rectangle of palette indices, the input of one tile export
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from ..constants import TILE_HEIGHT, TILE_WIDTH
from ..utils.validation import ValidationError, Validators


@dataclass(frozen=True)
class PixelGrid:
    """Immutable grid of palette indices (0-3), addressed as rows[y][x]"""

    width: int
    height: int
    rows: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "PixelGrid":
        """
        Build a grid from rows of palette indices.

        Raises:
            ValidationError: If the size or any pixel value is out of range
        """
        errors = Validators.validate_rows(rows)
        if errors:
            raise ValidationError("; ".join(errors))

        frozen_rows = tuple(tuple(int(value) for value in row) for row in rows)
        return cls(len(frozen_rows[0]), len(frozen_rows), frozen_rows)

    @classmethod
    def from_flat(cls, width: int, height: int,
                  pixels: Iterable[int]) -> "PixelGrid":
        """
        Build a grid from a flat row-major pixel sequence, such as the bytes
        of an indexed PIL image.

        Raises:
            ValidationError: If the pixel count does not match the size
        """
        pixels = list(pixels)
        if len(pixels) != width * height:
            raise ValidationError(
                f"Expected {width * height} pixels for {width}x{height}, got {len(pixels)}"
            )
        return cls.from_rows(
            [pixels[y * width:(y + 1) * width] for y in range(height)]
        )

    @property
    def tile_width(self) -> int:
        """Width in 8x8 tiles"""
        return self.width // TILE_WIDTH

    @property
    def tile_height(self) -> int:
        """Height in 8x8 tiles"""
        return self.height // TILE_HEIGHT

    @property
    def tile_count(self) -> int:
        return self.tile_width * self.tile_height

    def pixel(self, x: int, y: int) -> int:
        return self.rows[y][x]
