"""
Utils package for the tile exporter
Provides common validation helpers
"""

from .validation import InputSanitizer, ValidationError, Validators

__all__ = [
    "InputSanitizer",
    "ValidationError",
    "Validators",
]
