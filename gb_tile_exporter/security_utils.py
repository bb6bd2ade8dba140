#!/usr/bin/env python3
"""
Security utilities for safe file operations
"""

import pathlib

from .constants import MAX_PNG_FILE_SIZE

PROTECTED_PATTERNS = [
    "/etc/", "/usr/", "/bin/", "/sbin/", "/lib/", "/sys/", "/proc/",
    "/System/", "C:\\Windows\\", "C:\\Program Files\\", "/dev/"
]


class SecurityError(Exception):
    """Raised when a security violation is detected"""
    pass


def _check_path_format(file_path_str):
    """Common path format checks for both input and output paths"""
    if any(file_path_str.startswith(scheme) for scheme in ["file:", "http:", "https:", "ftp:", "sftp:"]):
        raise SecurityError(f"URI schemes not allowed: {file_path_str}")

    if file_path_str.startswith("\\\\") or "\\\\?\\" in file_path_str:
        raise SecurityError(f"UNC paths not allowed: {file_path_str}")

    if ".." in pathlib.PurePath(file_path_str).parts:
        raise SecurityError("Path traversal attempt detected")


def _resolve(file_path) -> pathlib.Path:
    try:
        return pathlib.Path(file_path).expanduser().resolve()
    except (ValueError, RuntimeError) as e:
        raise SecurityError(f"Invalid path: {e}") from e


def _is_protected(path: pathlib.Path) -> bool:
    path_str = str(path).replace("\\", "/")
    if not path_str.endswith("/"):
        path_str += "/"
    return any(path_str.startswith(pattern) for pattern in PROTECTED_PATTERNS)


def validate_file_path(file_path, max_size=MAX_PNG_FILE_SIZE):
    """
    Validate an input image path

    Args:
        file_path: Path to validate
        max_size: Maximum allowed file size in bytes

    Returns:
        Absolute path if valid

    Raises:
        SecurityError: If the path is unsafe, missing, not a file or too large
    """
    _check_path_format(str(file_path))
    path = _resolve(file_path)

    if _is_protected(path):
        raise SecurityError(f"Access to system directories not allowed: {path}")

    if not path.exists():
        raise SecurityError(f"File does not exist: {path}")

    if not path.is_file():
        raise SecurityError(f"Path is not a file: {path}")

    file_size = path.stat().st_size
    if file_size > max_size:
        raise SecurityError(f"File too large: {file_size} bytes (max {max_size})")

    return str(path)


def validate_output_dir(dir_path):
    """
    Validate the directory the generated sources are written to

    Args:
        dir_path: Directory to validate

    Returns:
        Absolute path if valid

    Raises:
        SecurityError: If the directory is unsafe or does not exist
    """
    _check_path_format(str(dir_path))
    path = _resolve(dir_path)

    if _is_protected(path):
        raise SecurityError(f"Cannot write into system directory: {path}")

    if not path.exists():
        raise SecurityError(f"Output directory does not exist: {path}")

    if not path.is_dir():
        raise SecurityError(f"Output path is not a directory: {path}")

    return str(path)
