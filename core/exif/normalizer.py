"""
EXIF normalizer - assembles the normalized metadata record.

Applies the omit-empty policy field by field: a formatter or decoder runs
only when its raw tag is present (non-empty text, or a code above 0). Flash
is the exception and is always decoded, since its fired bit is meaningful
at code 0.
"""

import logging
from typing import List, Optional

from core.constants import MetadataConstants
from core.exif import decoders
from core.exif.formatters import (
    format_datetime,
    format_float,
    format_human_rational,
    format_resolution,
)
from core.exif.gps import decode_gps
from core.exif.rational import parse_rational_or_zero
from schemas.exif import ExifMetadata, RawExif

logger = logging.getLogger(__name__)


def parse_subject_area(text: str) -> Optional[List[int]]:
    """
    Parse the SubjectArea tag into a list of integers.

    The 2..4 bound applies to the number of space separated tokens before
    filtering; tokens that are not integers are then dropped.

    Example:
        >>> parse_subject_area("10 20 30 abc")
        [10, 20, 30]
    """
    parts = text.split(" ")
    if not (
        MetadataConstants.SUBJECT_AREA_MIN_VALUES
        <= len(parts)
        <= MetadataConstants.SUBJECT_AREA_MAX_VALUES
    ):
        return None

    values = []
    for part in parts:
        try:
            values.append(int(part))
        except ValueError:
            continue
    return values or None


def normalize_exif(raw: RawExif) -> ExifMetadata:
    """
    Normalize a raw EXIF record.

    Never raises for malformed tag values: rational parse failures degrade
    to 0 and are logged, unparseable timestamps and unrecognized GPS
    references drop the affected field.

    Args:
        raw: Raw EXIF record from the extraction layer

    Returns:
        ExifMetadata with only the meaningful fields set
    """
    res = ExifMetadata(
        make=raw.make or None,
        model=raw.model or None,
        orientation=raw.orientation or None,
        software=raw.software or None,
        ycbcr_positioning=raw.ycbcr_positioning or None,
        exif_version=raw.exif_version or None,
        iso=raw.iso_speed_ratings or None,
        components_configuration=raw.components_configuration or None,
        focal_length_in_35mm_film=raw.focal_length_in_35mm_film or None,
        exif_image_width=raw.pixel_x_dimension or None,
        exif_image_height=raw.pixel_y_dimension or None,
        scene_type=raw.scene_type or None,
        scene_capture_type=raw.scene_capture_type or None,
    )

    if raw.x_resolution:
        res.x_resolution = format_resolution(raw.x_resolution, raw.resolution_unit)
    if raw.y_resolution:
        res.y_resolution = format_resolution(raw.y_resolution, raw.resolution_unit)

    # An unparseable timestamp formats to "" and stays absent
    if raw.datetime:
        res.date_time = format_datetime(raw.datetime) or None
    if raw.datetime_original:
        res.date_time_original = format_datetime(raw.datetime_original) or None
    if raw.datetime_digitized:
        res.date_time_digitized = format_datetime(raw.datetime_digitized) or None

    if raw.f_number:
        res.f_number = format_float(parse_rational_or_zero(raw.f_number), 2)
    if raw.exposure_time:
        res.exposure_time = format_human_rational(raw.exposure_time)
    if raw.shutter_speed_value:
        res.shutter_speed_value = format_human_rational(raw.shutter_speed_value)
    if raw.aperture_value:
        res.aperture_value = format_human_rational(raw.aperture_value)
    if raw.brightness_value:
        res.brightness_value = format_human_rational(raw.brightness_value)
    if raw.exposure_bias_value and raw.exposure_bias_value != "0":
        res.exposure_compensation = format_human_rational(raw.exposure_bias_value)
    if raw.focal_length:
        res.focal_length = format_float(parse_rational_or_zero(raw.focal_length), 2)

    if raw.subject_area:
        res.subject_area = parse_subject_area(raw.subject_area)

    res.flash, res.flash_mode = decoders.decode_flash(raw.flash)

    if raw.exposure_program > 0:
        res.exposure_program = decoders.decode_exposure_program(raw.exposure_program)
    if raw.metering_mode > 0:
        res.metering_mode = decoders.decode_metering_mode(raw.metering_mode)
    if raw.compression > 0:
        res.compression = decoders.decode_compression(raw.compression)
    if raw.color_space > 0:
        res.color_space = decoders.decode_color_space(raw.color_space)
    if raw.sensing_method > 0:
        res.sensing_method = decoders.decode_sensing_method(raw.sensing_method)
    if raw.exposure_mode > 0:
        res.exposure_mode = decoders.decode_exposure_mode(raw.exposure_mode)

    res.gps = decode_gps(raw)

    return res
