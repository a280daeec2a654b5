"""
EXIF extraction from Pillow images.

Builds a RawExif record from the tags Pillow exposes, converting values to
the text conventions the normalizer expects: rationals as "N/D",
multi-component values space separated, single-byte references as decimal
text.
"""

import logging
import numbers
from typing import Any, Callable, Dict, Mapping, Tuple

from PIL import ExifTags, Image

from schemas.exif import RawExif

logger = logging.getLogger(__name__)

COMPONENT_NAMES = {0: "-", 1: "Y", 2: "Cb", 3: "Cr", 4: "R", 5: "G", 6: "B"}
SCENE_TYPES = {1: "Directly photographed"}


def _text(value: Any) -> str:
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="ignore")
    if not isinstance(value, str):
        raise TypeError(f"expected text, got {type(value).__name__}")
    return value.strip("\x00").strip()


def _rational(value: Any) -> str:
    if isinstance(value, (tuple, list)):
        return " ".join(_rational(v) for v in value)
    if isinstance(value, bool):
        raise TypeError("expected rational, got bool")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, numbers.Rational):
        return f"{value.numerator}/{value.denominator}"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (str, bytes)):
        return _text(value)
    raise TypeError(f"expected rational, got {type(value).__name__}")


def _integer(value: Any) -> int:
    if isinstance(value, (tuple, list)):
        if not value:
            raise TypeError("empty sequence")
        return _integer(value[0])
    if isinstance(value, bytes):
        return value[0] if len(value) == 1 else int(_text(value))
    if isinstance(value, int):
        return value
    if isinstance(value, numbers.Rational):
        return int(float(value))
    if isinstance(value, str):
        return int(value.strip("\x00").strip())
    raise TypeError(f"expected integer, got {type(value).__name__}")


def _integers(value: Any) -> str:
    if not isinstance(value, (tuple, list)):
        value = (value,)
    return " ".join(str(_integer(v)) for v in value)


def _reference(value: Any) -> str:
    if isinstance(value, bytes) and len(value) == 1 and not value.isalpha():
        return str(value[0])
    if isinstance(value, (tuple, list)) and len(value) == 1:
        return str(_integer(value))
    if isinstance(value, int):
        return str(value)
    return _text(value)


def _components(value: Any) -> str:
    if isinstance(value, str):
        return _text(value)
    return " ".join(COMPONENT_NAMES.get(b, str(b)) for b in bytes(value))


def _scene_type(value: Any) -> str:
    code = _integer(value)
    return SCENE_TYPES.get(code, str(code))


# tag id -> (RawExif field, converter), base and Exif IFDs
EXIF_TAG_FIELDS: Dict[int, Tuple[str, Callable[[Any], Any]]] = {
    0x0103: ("compression", _integer),
    0x010F: ("make", _text),
    0x0110: ("model", _text),
    0x0112: ("orientation", _integer),
    0x011A: ("x_resolution", _rational),
    0x011B: ("y_resolution", _rational),
    0x0128: ("resolution_unit", _integer),
    0x0131: ("software", _text),
    0x0132: ("datetime", _text),
    0x0213: ("ycbcr_positioning", _integer),
    0x829A: ("exposure_time", _rational),
    0x829D: ("f_number", _rational),
    0x8822: ("exposure_program", _integer),
    0x8827: ("iso_speed_ratings", _integer),
    0x9000: ("exif_version", _text),
    0x9003: ("datetime_original", _text),
    0x9004: ("datetime_digitized", _text),
    0x9101: ("components_configuration", _components),
    0x9201: ("shutter_speed_value", _rational),
    0x9202: ("aperture_value", _rational),
    0x9203: ("brightness_value", _rational),
    0x9204: ("exposure_bias_value", _rational),
    0x9207: ("metering_mode", _integer),
    0x9209: ("flash", _integer),
    0x920A: ("focal_length", _rational),
    0x9214: ("subject_area", _integers),
    0xA001: ("color_space", _integer),
    0xA002: ("pixel_x_dimension", _integer),
    0xA003: ("pixel_y_dimension", _integer),
    0xA217: ("sensing_method", _integer),
    0xA301: ("scene_type", _scene_type),
    0xA402: ("exposure_mode", _integer),
    0xA405: ("focal_length_in_35mm_film", _integer),
    0xA406: ("scene_capture_type", _integer),
}

GPS_TAG_FIELDS: Dict[int, Tuple[str, Callable[[Any], Any]]] = {
    0x01: ("gps_latitude_ref", _reference),
    0x02: ("gps_latitude", _rational),
    0x03: ("gps_longitude_ref", _reference),
    0x04: ("gps_longitude", _rational),
    0x05: ("gps_altitude_ref", _reference),
    0x06: ("gps_altitude", _rational),
    0x0C: ("gps_speed_ref", _reference),
    0x0D: ("gps_speed", _rational),
    0x10: ("gps_img_direction_ref", _reference),
    0x11: ("gps_img_direction", _rational),
}


def _convert_tags(
    tags: Mapping[int, Any], fields: Dict[int, Tuple[str, Callable[[Any], Any]]]
) -> Dict[str, Any]:
    values = {}
    for tag, value in tags.items():
        if tag not in fields or value is None:
            continue
        name, convert = fields[tag]
        try:
            values[name] = convert(value)
        except (TypeError, ValueError, IndexError, ZeroDivisionError) as e:
            logger.debug(f"Ignoring EXIF tag 0x{tag:04x} ({name}) value {value!r}: {e}")
    return values


def raw_exif_from_tags(tags: Mapping[int, Any], gps_tags: Mapping[int, Any]) -> RawExif:
    """
    Convert Pillow tag values into a RawExif record.

    Args:
        tags: Base and Exif IFD tags, keyed by tag id
        gps_tags: GPS IFD tags, keyed by tag id

    Returns:
        RawExif with absent or unusable tags left at their empty defaults
    """
    values = _convert_tags(tags, EXIF_TAG_FIELDS)
    values.update(_convert_tags(gps_tags, GPS_TAG_FIELDS))
    return RawExif(**values)


def collect_exif_tags(image: Image.Image) -> Tuple[Dict[int, Any], Dict[int, Any]]:
    """
    Read the EXIF tags of an image.

    Returns:
        Tuple of (base and Exif IFD tags merged, GPS IFD tags)
    """
    exif = image.getexif()
    tags: Dict[int, Any] = dict(exif.items())
    tags.update(exif.get_ifd(ExifTags.IFD.Exif))
    gps_tags = dict(exif.get_ifd(ExifTags.IFD.GPSInfo))
    return tags, gps_tags


def extract_raw_exif(image: Image.Image) -> RawExif:
    """Extract the RawExif record of a Pillow image."""
    tags, gps_tags = collect_exif_tags(image)
    return raw_exif_from_tags(tags, gps_tags)
