"""
Metadata Service - Business logic for image description and EXIF normalization.

This service decodes uploaded image data with Pillow, extracts the raw EXIF
record and runs it through the normalization engine.
"""

import io
import logging

from PIL import Image, UnidentifiedImageError

from api.exceptions import EmptyBodyException, PayloadTooLargeException, UnsupportedMediaException
from core.constants import ImageConstants
from core.exif import extract_raw_exif, normalize_exif
from schemas import ExifMetadata, ImageInfo, RawExif

logger = logging.getLogger(__name__)


class MetadataService:
    """
    Service for image metadata operations.

    Stateless apart from the upload limit; safe to share across requests.
    """

    def __init__(self, max_upload_bytes: int = ImageConstants.DEFAULT_MAX_UPLOAD_MB * 1024 * 1024):
        """
        Initialize metadata service.

        Args:
            max_upload_bytes: Largest accepted image payload
        """
        self.max_upload_bytes = max_upload_bytes

    def read_image(self, data: bytes) -> Image.Image:
        """
        Decode image data.

        Args:
            data: Encoded image bytes

        Returns:
            Opened Pillow image (pixel data is loaded lazily)

        Raises:
            EmptyBodyException: If data is empty
            PayloadTooLargeException: If data exceeds the upload limit
            UnsupportedMediaException: If Pillow cannot identify the format
        """
        if not data:
            raise EmptyBodyException()
        if len(data) > self.max_upload_bytes:
            raise PayloadTooLargeException(len(data), self.max_upload_bytes)

        try:
            return Image.open(io.BytesIO(data))
        except (UnidentifiedImageError, OSError) as e:
            logger.info(f"Rejecting undecodable image ({len(data)} bytes): {e}")
            raise UnsupportedMediaException() from e

    def extract_raw_exif(self, data: bytes) -> RawExif:
        """Extract the raw EXIF record of encoded image data"""
        with self.read_image(data) as image:
            return extract_raw_exif(image)

    def normalize(self, raw: RawExif) -> ExifMetadata:
        """Normalize a raw EXIF record"""
        return normalize_exif(raw)

    def extract_exif(self, data: bytes) -> ExifMetadata:
        """Extract and normalize the EXIF metadata of encoded image data"""
        return self.normalize(self.extract_raw_exif(data))

    def describe(self, data: bytes) -> ImageInfo:
        """
        Describe an image.

        Args:
            data: Encoded image bytes

        Returns:
            ImageInfo with dimensions, format, color space and normalized EXIF
        """
        with self.read_image(data) as image:
            raw = extract_raw_exif(image)
            bands = image.getbands()

            info = ImageInfo(
                width=image.width,
                height=image.height,
                type=(image.format or "unknown").lower(),
                space=ImageConstants.COLOR_SPACES.get(image.mode, image.mode.lower()),
                has_alpha="A" in bands or "transparency" in image.info,
                has_profile="icc_profile" in image.info,
                channels=len(bands),
                orientation=raw.orientation,
                exif=self.normalize(raw),
            )

        logger.debug(f"Described {info.type} image {info.width}x{info.height}")
        return info
