"""
Tests for security_utils.py - input and output path validation
"""

import os

import pytest

from gb_tile_exporter.security_utils import (SecurityError, validate_file_path,
                                             validate_output_dir)


class TestValidateFilePath:
    """Test path validation for input images"""

    @pytest.mark.unit
    def test_valid_file_path(self, indexed_png):
        result = validate_file_path(indexed_png)

        assert result == str(indexed_png.resolve())
        assert os.path.isabs(result)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "path",
        [
            "../../etc/passwd",
            "images/../../secret.png",
            "file:///etc/passwd",
            "http://example.com/image.png",
            "\\\\server\\share\\image.png",
        ],
    )
    def test_unsafe_paths(self, path):
        with pytest.raises(SecurityError):
            validate_file_path(path)

    @pytest.mark.unit
    def test_system_directory(self):
        with pytest.raises(SecurityError, match="system directories"):
            validate_file_path("/etc/passwd")

    @pytest.mark.unit
    def test_file_size_limit(self, indexed_png):
        with pytest.raises(SecurityError, match="File too large"):
            validate_file_path(indexed_png, max_size=10)

    @pytest.mark.unit
    def test_nonexistent_file(self, tmp_path):
        with pytest.raises(SecurityError, match="File does not exist"):
            validate_file_path(tmp_path / "nonexistent.png")

    @pytest.mark.unit
    def test_directory_path(self, tmp_path):
        with pytest.raises(SecurityError, match="Path is not a file"):
            validate_file_path(tmp_path)

    @pytest.mark.unit
    def test_dots_in_file_name_allowed(self, tmp_path):
        path = tmp_path / "title..v2.png"
        path.write_bytes(b"x")

        assert validate_file_path(path) == str(path.resolve())


class TestValidateOutputDir:
    """Test path validation for the output folder"""

    @pytest.mark.unit
    def test_valid_dir(self, output_dir):
        assert validate_output_dir(output_dir) == str(output_dir.resolve())

    @pytest.mark.unit
    def test_missing_dir(self, tmp_path):
        with pytest.raises(SecurityError, match="does not exist"):
            validate_output_dir(tmp_path / "missing")

    @pytest.mark.unit
    def test_file_instead_of_dir(self, indexed_png):
        with pytest.raises(SecurityError, match="not a directory"):
            validate_output_dir(indexed_png)

    @pytest.mark.unit
    def test_system_dir(self):
        with pytest.raises(SecurityError, match="system directory"):
            validate_output_dir("/usr/include")

    @pytest.mark.unit
    def test_traversal(self):
        with pytest.raises(SecurityError, match="traversal"):
            validate_output_dir("out/../../")
