#!/usr/bin/env python3
"""
Constants for the Game Boy tile exporter
All magic numbers and hardware limits in one place
"""

# Game Boy tile specifications
TILE_WIDTH = 8  # pixels
TILE_HEIGHT = 8  # pixels
PIXELS_PER_TILE = 64  # 8x8
BYTES_PER_TILE_2BPP = 16  # 2 bits per pixel, 8x8 pixels
ROWS_PER_TILE = TILE_HEIGHT

# Pixel masks
PIXEL_LOW_BIT_MASK = 0x01
PIXEL_HIGH_BIT_MASK = 0x02
ROW_WORD_MASK = 0xFFFF
PLANE_BYTE_MASK = 0xFF

# Image limits (both dimensions)
IMAGE_SIZE_MIN = TILE_WIDTH
IMAGE_SIZE_MAX = 256
IMAGE_COLORS = 4  # Indexed palette size expected by the hardware

# Video memory limits
VRAM_TILE_LIMIT = 256  # Unique tiles resident at the same time
VRAM_TILE_LIMIT_HACK = 384  # Using the shared tile block hack

# Maximum number of tiles an image can hold
MAX_TILES_PER_IMAGE = (IMAGE_SIZE_MAX // TILE_WIDTH) * (IMAGE_SIZE_MAX // TILE_HEIGHT)

# GBDK-2020 asset limits
ASSET_NAME_MAX = 32  # Including the identifier prefix budget
ASSET_NAME_PREFIX_BUDGET = 4
BANK_MIN = 0
BANK_MAX = 255

# File size limits
MAX_PNG_FILE_SIZE = 5 * 1024 * 1024  # 5MB

# Output file extensions
HEADER_EXTENSION = ".h"
SOURCE_EXTENSION = ".c"
