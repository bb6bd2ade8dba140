"""
Models package for the tile exporter
Provides the data model of one tile export
"""

from .export_result import TileExportResult
from .pixel_grid import PixelGrid
from .tile_models import Canonical, DuplicateOf, EncodedTile, RawTile, TileSlot

__all__ = [
    'Canonical',
    'DuplicateOf',
    'EncodedTile',
    'PixelGrid',
    'RawTile',
    'TileExportResult',
    'TileSlot',
]
