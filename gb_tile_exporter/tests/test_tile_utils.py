#!/usr/bin/env python3
"""
Tests for tile_utils.py
Tile extraction order and the exact 2bpp bit layout
"""

import pytest

from gb_tile_exporter.constants import (BYTES_PER_TILE_2BPP, PIXELS_PER_TILE,
                                       TILE_HEIGHT, TILE_WIDTH)
from gb_tile_exporter.models import EncodedTile, PixelGrid
from gb_tile_exporter.tile_utils import (encode_2bpp_tile, encode_tiles,
                                         extract_tile, extract_tiles)
from tile_helpers import decode_row_word, make_rows


@pytest.mark.unit
class TestTileExtraction:
    """Test slicing a grid into 8x8 tiles"""

    @pytest.mark.parametrize(
        "width,height", [(8, 8), (16, 8), (8, 24), (64, 32), (256, 256)]
    )
    def test_tile_count(self, width, height):
        """Test that a W x H grid yields (W/8)*(H/8) tiles"""
        grid = PixelGrid.from_rows(make_rows(width, height))
        tiles = extract_tiles(grid)

        assert len(tiles) == (width // 8) * (height // 8)
        assert all(len(tile) == PIXELS_PER_TILE for tile in tiles)

    def test_row_major_tile_order(self):
        """Test that tile (row, col) lands at index row * tile_width + col"""
        # Every pixel carries the number of its tile, modulo 4
        width, height = 24, 16
        rows = [
            [((y // 8) * 3 + x // 8) % 4 for x in range(width)]
            for y in range(height)
        ]
        grid = PixelGrid.from_rows(rows)

        tiles = extract_tiles(grid)

        for index, tile in enumerate(tiles):
            assert set(tile) == {index % 4}

    def test_pixels_in_row_major_order(self):
        """Test the order of pixels inside one tile"""
        rows = make_rows(16, 8)
        rows[2][9] = 1  # tile 1, local (1, 2)
        rows[7][15] = 3  # tile 1, local (7, 7)
        grid = PixelGrid.from_rows(rows)

        tile = extract_tile(grid, 1, 0)

        assert tile[2 * TILE_WIDTH + 1] == 1
        assert tile[7 * TILE_WIDTH + 7] == 3
        assert sum(tile) == 4

    def test_extraction_does_not_touch_grid(self, checker_rows):
        """Test that the grid is unchanged after extraction"""
        grid = PixelGrid.from_rows(checker_rows)
        before = grid.rows

        extract_tiles(grid)

        assert grid.rows == before


@pytest.mark.unit
class TestTileEncoding:
    """Test 2bpp tile encoding"""

    def test_blank_tile(self):
        """Test that an all-zero tile encodes to zero words"""
        encoded = encode_2bpp_tile([0] * PIXELS_PER_TILE)

        assert isinstance(encoded, EncodedTile)
        assert encoded.rows == (0x0000,) * TILE_HEIGHT

    def test_solid_color_three(self):
        """Test that index 3 sets both planes"""
        encoded = encode_2bpp_tile([3] * PIXELS_PER_TILE)

        assert encoded.rows == (0xFFFF,) * TILE_HEIGHT

    def test_solid_color_one_uses_upper_byte(self):
        """Test that the low color bit goes to the upper byte"""
        encoded = encode_2bpp_tile([1] * PIXELS_PER_TILE)

        assert encoded.rows == (0xFF00,) * TILE_HEIGHT

    def test_solid_color_two_uses_lower_byte(self):
        """Test that the high color bit goes to the lower byte"""
        encoded = encode_2bpp_tile([2] * PIXELS_PER_TILE)

        assert encoded.rows == (0x00FF,) * TILE_HEIGHT

    def test_striped_row_pattern(self, striped_rows):
        """Test the 0 1 2 3 0 1 2 3 pattern gives planes 0x55 and 0x33"""
        pixels = [value for row in striped_rows for value in row]

        encoded = encode_2bpp_tile(pixels)

        assert encoded.rows == (0x5533,) * TILE_HEIGHT

    def test_leftmost_pixel_is_most_significant_bit(self):
        """Test bit position 7 - x for a single pixel"""
        pixels = [0] * PIXELS_PER_TILE
        pixels[0] = 3  # row 0, leftmost
        pixels[TILE_WIDTH + 7] = 1  # row 1, rightmost

        encoded = encode_2bpp_tile(pixels)

        assert encoded.rows[0] == 0x8080
        assert encoded.rows[1] == 0x0100
        assert encoded.rows[2:] == (0,) * 6

    def test_example_row_from_hardware_docs(self):
        """Test the row 1 0 3 0 2 1 0 3 gives bytes 0xA5 0x29"""
        row = [1, 0, 3, 0, 2, 1, 0, 3]
        encoded = encode_2bpp_tile(row * TILE_HEIGHT)

        assert encoded.rows[0] == 0xA529

    def test_every_value_at_every_position_decodes_back(self):
        """Test that packing is lossless for each value and column"""
        for value in range(4):
            for x in range(TILE_WIDTH):
                row = [0] * TILE_WIDTH
                row[x] = value
                encoded = encode_2bpp_tile(row * TILE_HEIGHT)

                for word in encoded.rows:
                    assert decode_row_word(word) == row

    def test_wrong_size_error(self):
        """Test error when pixel list has wrong size"""
        with pytest.raises(ValueError, match="Expected 64 pixels, got 32"):
            encode_2bpp_tile([0] * 32)

        with pytest.raises(ValueError, match="Expected 64 pixels, got 0"):
            encode_2bpp_tile([])

    def test_encode_tiles_keeps_order(self):
        """Test batch encoding preserves input order"""
        tiles = [[0] * 64, [3] * 64, [1] * 64]

        encoded = encode_tiles(tiles)

        assert [tile.rows[0] for tile in encoded] == [0x0000, 0xFFFF, 0xFF00]


@pytest.mark.unit
class TestEncodedTile:
    """Test the EncodedTile value object"""

    def test_equality_and_hash_follow_content(self):
        a = EncodedTile((1, 2, 3, 4, 5, 6, 7, 8))
        b = EncodedTile((1, 2, 3, 4, 5, 6, 7, 8))
        c = EncodedTile((1, 2, 3, 4, 5, 6, 7, 9))

        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert len({a, b, c}) == 2

    def test_to_bytes_upper_byte_first(self):
        tile = EncodedTile((0xA529,) + (0x0000,) * 7)

        data = tile.to_bytes()

        assert len(data) == BYTES_PER_TILE_2BPP
        assert data[:2] == b"\xA5\x29"
        assert data[2:] == bytes(14)

    def test_rejects_wrong_row_count(self):
        with pytest.raises(ValueError, match="Expected 8 rows"):
            EncodedTile((0,) * 7)

    def test_rejects_wide_words(self):
        with pytest.raises(ValueError, match="does not fit in 16 bits"):
            EncodedTile((0x10000,) + (0,) * 7)
