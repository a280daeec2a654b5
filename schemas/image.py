"""
Image API models.

This module contains models for image description:
- Image information with normalized EXIF metadata
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .exif import ExifMetadata


class ImageInfo(BaseModel):
    """Image description returned by the info endpoint"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    width: int = Field(..., ge=0, description="Width in pixels")
    height: int = Field(..., ge=0, description="Height in pixels")
    type: str = Field(..., description="Image format, e.g. 'jpeg'")
    space: str = Field(..., description="Color space, e.g. 'srgb'")
    has_alpha: bool
    has_profile: bool
    channels: int
    orientation: int = 0
    exif: Optional[ExifMetadata] = None
