"""
Game Boy Tile Exporter
Converts 4-color indexed images into deduplicated 2bpp tiles and a tilemap
"""

from .encoder import encode
from .exporter import ExportError, ExportReport, export_png
from .gbdk_writer import render_header, render_source, write_gbdk_sources
from .image_reader import image_to_pixel_grid, read_indexed_png
from .models import (Canonical, DuplicateOf, EncodedTile, PixelGrid,
                     TileExportResult)
from .tile_deduplicator import deduplicate_tiles
from .tile_utils import encode_2bpp_tile, extract_tiles

__version__ = "1.0.0"
__all__ = [
    "Canonical",
    "DuplicateOf",
    "EncodedTile",
    "ExportError",
    "ExportReport",
    "PixelGrid",
    "TileExportResult",
    "deduplicate_tiles",
    "encode",
    "encode_2bpp_tile",
    "export_png",
    "extract_tiles",
    "image_to_pixel_grid",
    "read_indexed_png",
    "render_header",
    "render_source",
    "write_gbdk_sources",
]
