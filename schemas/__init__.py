"""
Schemas Package

This package contains all Pydantic schemas for data validation and serialization,
organized by domain:
- exif: raw and normalized EXIF records
- image: image description responses
- system: version and health responses
"""

from .exif import EnumValue, ExifGPS, ExifMetadata, FlashModeValue, RawExif
from .image import ImageInfo
from .system import HealthStats, VersionInfo

__all__ = [
    # EXIF models
    "RawExif",
    "ExifMetadata",
    "ExifGPS",
    "EnumValue",
    "FlashModeValue",
    # Image models
    "ImageInfo",
    # System models
    "HealthStats",
    "VersionInfo",
]
