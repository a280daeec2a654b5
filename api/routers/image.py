"""
Image API Router - Image description and EXIF extraction
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from api.dependencies import get_metadata_service
from api.exceptions import safe_endpoint
from schemas import ExifMetadata, ImageInfo

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/info", response_model=ImageInfo, response_model_exclude_none=True)
@safe_endpoint
async def image_info(
    file: UploadFile = File(..., description="Image to describe"),
    metadata_service=Depends(get_metadata_service),
) -> ImageInfo:
    """
    Describe an uploaded image.

    Returns dimensions, format, color space, alpha and ICC profile presence,
    channel count, orientation and the normalized EXIF metadata.
    """
    data = await file.read()
    info = metadata_service.describe(data)

    logger.info(f"Image info for {file.filename}: {info.type} {info.width}x{info.height}")

    return info


@router.post("/exif", response_model=ExifMetadata, response_model_exclude_none=True)
@safe_endpoint
async def image_exif(
    file: UploadFile = File(..., description="Image to read EXIF metadata from"),
    metadata_service=Depends(get_metadata_service),
) -> ExifMetadata:
    """Extract and normalize the EXIF metadata of an uploaded image."""
    data = await file.read()
    return metadata_service.extract_exif(data)
