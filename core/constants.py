"""
Constants and configuration values for the Image Gateway.
Centralizes all magic numbers used by the metadata engine and the API layer.
"""

from enum import IntEnum


# Image Upload Constants
class ImageConstants:
    """Constants related to uploaded images."""

    # Upload limits
    DEFAULT_MAX_UPLOAD_MB = 25
    MIN_UPLOAD_MB = 1
    MAX_UPLOAD_MB = 512

    # Color space names reported for PIL modes
    COLOR_SPACES = {
        "1": "b-w",
        "L": "b-w",
        "LA": "b-w",
        "P": "srgb",
        "RGB": "srgb",
        "RGBA": "srgb",
        "RGBX": "srgb",
        "CMYK": "cmyk",
        "YCbCr": "ycbcr",
        "LAB": "lab",
        "HSV": "hsv",
        "I": "grey16",
        "I;16": "grey16",
        "F": "float",
    }


# EXIF Metadata Constants
class MetadataConstants:
    """Constants for EXIF metadata normalization."""

    # Camera timestamp layout and its re-emitted form (no timezone available)
    EXIF_DATETIME_FORMAT = "%Y:%m:%d %H:%M:%S"
    OUTPUT_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

    # Values at or above this are displayed as decimals, below as 1/N
    HUMAN_RATIONAL_THRESHOLD = 0.3

    # Decimal places
    DEFAULT_DECIMALS = 2
    ALTITUDE_DECIMALS = 0
    GPS_COORDINATE_DECIMALS = 5
    GPS_DIRECTION_DECIMALS = 2

    # SubjectArea is a point (2), a circle (3) or a rectangle (4)
    SUBJECT_AREA_MIN_VALUES = 2
    SUBJECT_AREA_MAX_VALUES = 4

    # GPSAltitudeRef value for "below sea level"
    ALTITUDE_BELOW_SEA_LEVEL = "1"


class ResolutionUnit(IntEnum):
    """EXIF ResolutionUnit codes."""

    NONE = 1
    INCHES = 2
    CENTIMETERS = 3


RESOLUTION_SUFFIXES = {
    ResolutionUnit.INCHES: " ppi",
    ResolutionUnit.CENTIMETERS: " ppcm",
}

SPEED_SUFFIXES = {
    "K": " km/h",
    "M": " mph",
    "N": " kn",
}

DIRECTION_REFERENCES = {
    "T": "True North",
    "M": "Magnetic North",
}
