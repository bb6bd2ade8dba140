"""
Shared pytest fixtures and configuration for tile exporter tests
"""

import logging

import pytest

from gb_tile_exporter.logging_config import LOGGER_NAME
from gb_tile_exporter.models import PixelGrid
from gb_tile_exporter.settings_manager import SettingsManager
from tile_helpers import make_rows, save_indexed_png


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() between tests so caplog sees package records"""
    logger = logging.getLogger(LOGGER_NAME)
    yield
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_settings(tmp_path, monkeypatch):
    """Settings manager writing into a temporary directory"""
    settings_dir = tmp_path / "settings"
    settings_dir.mkdir()

    def mock_get_settings_path(self):
        return settings_dir / "settings.json"

    monkeypatch.setattr(SettingsManager, "_get_settings_path", mock_get_settings_path)
    return SettingsManager("test_app")


@pytest.fixture
def blank_grid():
    """8x8 image entirely of index 0"""
    return PixelGrid.from_rows(make_rows(8, 8, 0))


@pytest.fixture
def striped_rows():
    """8x8 tile whose every row is 0 1 2 3 0 1 2 3"""
    return [[0, 1, 2, 3, 0, 1, 2, 3] for _ in range(8)]


@pytest.fixture
def checker_rows():
    """32x16 image of alternating solid 0 and solid 3 tiles"""
    rows = []
    for y in range(16):
        row = []
        for x in range(32):
            tile_index = (y // 8) * 4 + (x // 8)
            row.append(0 if tile_index % 2 == 0 else 3)
        rows.append(row)
    return rows


@pytest.fixture
def indexed_png(tmp_path, checker_rows):
    """Path of a valid 32x16 4-color PNG"""
    return save_indexed_png(tmp_path / "checker.png", checker_rows)


@pytest.fixture
def output_dir(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    return out
