"""
Core modules for the Image Gateway
"""

from .exif import extract_raw_exif, normalize_exif

__all__ = ["extract_raw_exif", "normalize_exif"]
