#!/usr/bin/env python3
"""
Input validation utilities
Checks images and export parameters before they reach the tile encoder
"""

import re
from typing import Iterable, List, Sequence, Tuple

from ..constants import (ASSET_NAME_MAX, ASSET_NAME_PREFIX_BUDGET, BANK_MAX,
                         BANK_MIN, IMAGE_COLORS, IMAGE_SIZE_MAX,
                         IMAGE_SIZE_MIN, TILE_HEIGHT, TILE_WIDTH)

_C_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

C_RESERVED_WORDS = frozenset({
    "auto", "break", "case", "char", "const", "continue", "default", "do",
    "double", "else", "enum", "extern", "float", "for", "goto", "if", "inline",
    "int", "long", "register", "restrict", "return", "short", "signed",
    "sizeof", "static", "struct", "switch", "typedef", "union", "unsigned",
    "void", "volatile", "while",
})


class ValidationError(Exception):
    """Custom exception for validation errors"""
    pass


class Validators:
    """Common validation functions"""

    @staticmethod
    def validate_image_dimensions(width: int, height: int) -> List[str]:
        """
        Validate image dimensions for Game Boy tile export

        Args:
            width: Image width in pixels
            height: Image height in pixels

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if width <= 0 or height <= 0:
            errors.append("Invalid image dimensions")
            return errors

        if not (IMAGE_SIZE_MIN <= width <= IMAGE_SIZE_MAX) or \
                not (IMAGE_SIZE_MIN <= height <= IMAGE_SIZE_MAX):
            errors.append(
                f"Image size should be between {IMAGE_SIZE_MIN}x{IMAGE_SIZE_MIN} "
                f"and {IMAGE_SIZE_MAX}x{IMAGE_SIZE_MAX} pixels (got {width}x{height})"
            )

        if width % TILE_WIDTH != 0:
            errors.append(f"Width ({width}) must be multiple of {TILE_WIDTH}")

        if height % TILE_HEIGHT != 0:
            errors.append(f"Height ({height}) must be multiple of {TILE_HEIGHT}")

        return errors

    @staticmethod
    def validate_pixel_values(pixels: Iterable[int]) -> Tuple[bool, str]:
        """
        Validate that every pixel is a palette index the hardware can show

        Returns:
            Tuple of (is_valid, error_message)
        """
        for position, value in enumerate(pixels):
            if (isinstance(value, bool) or not isinstance(value, int)
                    or value < 0 or value >= IMAGE_COLORS):
                return False, (
                    f"Pixel {position} has palette index {value!r}, "
                    f"expected 0-{IMAGE_COLORS - 1}"
                )
        return True, ""

    @staticmethod
    def validate_rows(rows: Sequence[Sequence[int]]) -> List[str]:
        """
        Validate a grid given as rows of palette indices

        Returns:
            List of validation errors (empty if valid)
        """
        height = len(rows)
        width = len(rows[0]) if height else 0

        errors = Validators.validate_image_dimensions(width, height)
        if errors:
            return errors

        for y, row in enumerate(rows):
            if len(row) != width:
                errors.append(f"Row {y} has {len(row)} pixels, expected {width}")
                return errors

        for y, row in enumerate(rows):
            valid, error = Validators.validate_pixel_values(row)
            if not valid:
                errors.append(f"Row {y}: {error}")
                break

        return errors

    @staticmethod
    def validate_asset_name(name: str) -> Tuple[bool, str]:
        """
        Validate the asset name used for the C identifiers

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not name:
            return False, "The asset name can not be empty"

        max_length = ASSET_NAME_MAX - ASSET_NAME_PREFIX_BUDGET
        if len(name) > max_length:
            return False, f"The asset name can not be longer than {max_length} characters"

        if not _C_IDENTIFIER.fullmatch(name):
            return False, f"The asset name must be a valid C identifier: {name!r}"

        if name in C_RESERVED_WORDS:
            return False, f"The asset name can not be a reserved word: {name!r}"

        return True, ""

    @staticmethod
    def validate_bank(bank: int) -> Tuple[bool, str]:
        """
        Validate a ROM bank number

        Returns:
            Tuple of (is_valid, error_message)
        """
        if isinstance(bank, bool) or not isinstance(bank, int):
            return False, f"Bank number must be an integer (got {bank!r})"

        if bank < BANK_MIN:
            return False, "Bank number cannot be negative"

        if bank > BANK_MAX:
            return False, f"Bank number must be {BANK_MIN}-{BANK_MAX}"

        return True, ""


class InputSanitizer:
    """Sanitize user input"""

    @staticmethod
    def sanitize_asset_name(raw_name: str, default: str = "Image") -> str:
        """
        Turn a file stem into a usable asset name

        Invalid characters become underscores, a leading digit gets an
        underscore prefix and the first letter is capitalized.

        Args:
            raw_name: Name to sanitize (usually the input file stem)
            default: Default name if nothing usable remains

        Returns:
            Sanitized asset name
        """
        name = re.sub(r"[^A-Za-z0-9_]", "_", raw_name or "").strip("_")
        if not name:
            return default

        if name[0].isdigit():
            name = f"_{name}"

        name = name[:ASSET_NAME_MAX - ASSET_NAME_PREFIX_BUDGET]
        return name[0].upper() + name[1:]
