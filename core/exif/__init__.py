"""
EXIF metadata engine.

This package turns raw camera tags into the normalized metadata record:
- rational: fraction-encoded tag parsing
- formatters: display formatting of floats, exposures, resolutions, timestamps
- decoders: code-to-label tables (flash, exposure program, compression, ...)
- gps: sexagesimal coordinate decoding
- normalizer: assembles the normalized record
- extractor: reads raw tags from Pillow images
"""

from core.exif.extractor import extract_raw_exif, raw_exif_from_tags
from core.exif.gps import decode_gps, parse_gps_coordinate
from core.exif.normalizer import normalize_exif, parse_subject_area
from core.exif.rational import RationalFormatError, parse_rational, parse_rational_or_zero

__all__ = [
    "RationalFormatError",
    "parse_rational",
    "parse_rational_or_zero",
    "decode_gps",
    "parse_gps_coordinate",
    "normalize_exif",
    "parse_subject_area",
    "extract_raw_exif",
    "raw_exif_from_tags",
]
