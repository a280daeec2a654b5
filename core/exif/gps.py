"""
GPS decoding.

Converts sexagesimal coordinates and their hemisphere references into signed
decimal degrees, and formats the optional altitude, speed and image
direction tags.
"""

import logging
from typing import Optional

from core.constants import DIRECTION_REFERENCES, SPEED_SUFFIXES, MetadataConstants
from core.exif.formatters import format_float, round_half_away
from core.exif.rational import RationalFormatError, parse_rational, parse_rational_or_zero
from schemas.exif import ExifGPS, RawExif

logger = logging.getLogger(__name__)

# Sign applied for each accepted hemisphere reference
LATITUDE_SIGNS = {"N": 1, "S": -1}
LONGITUDE_SIGNS = {"E": 1, "W": -1}


def parse_gps_coordinate(text: str) -> float:
    """
    Convert a coordinate given as degrees, minutes, seconds (and optionally
    further base-60 subdivisions) into decimal degrees.

    Each space separated component is a rational; component i contributes
    value / 60**i. A component that fails to parse counts as 0.

    Example:
        >>> parse_gps_coordinate("40/1 30/1 0/1")
        40.5
    """
    result = 0.0
    for i, part in enumerate(text.split(" ")):
        result += parse_rational_or_zero(part) / 60**i
    return result


def _hemisphere_sign(ref: str, signs: dict) -> Optional[int]:
    return signs.get(ref.upper()) if len(ref) == 1 else None


def _format_altitude(raw: RawExif) -> str:
    altitude = parse_rational(raw.gps_altitude)
    if raw.gps_altitude_ref == MetadataConstants.ALTITUDE_BELOW_SEA_LEVEL:
        altitude = -altitude
    return format_float(altitude, MetadataConstants.ALTITUDE_DECIMALS) + " m"


def _format_speed(raw: RawExif) -> str:
    speed = parse_rational(raw.gps_speed)
    # Unknown references keep the bare number
    suffix = SPEED_SUFFIXES.get(raw.gps_speed_ref.upper(), "")
    return format_float(speed, 2) + suffix


def decode_gps(raw: RawExif) -> Optional[ExifGPS]:
    """
    Build the GPS sub-record from a raw EXIF record.

    The record is all-or-nothing: it is omitted when latitude or longitude is
    missing, or when either hemisphere reference is not one of N/S (latitude)
    or E/W (longitude), case-insensitive. Altitude, speed and direction are
    independently optional and are skipped when their value does not parse.

    Args:
        raw: Raw EXIF record

    Returns:
        ExifGPS, or None if the position cannot be decoded
    """
    if not raw.gps_latitude or not raw.gps_longitude:
        return None

    lat_sign = _hemisphere_sign(raw.gps_latitude_ref, LATITUDE_SIGNS)
    lon_sign = _hemisphere_sign(raw.gps_longitude_ref, LONGITUDE_SIGNS)
    if lat_sign is None or lon_sign is None:
        logger.debug(
            f"Dropping GPS position with unrecognized references "
            f"'{raw.gps_latitude_ref}'/'{raw.gps_longitude_ref}'"
        )
        return None

    decimals = MetadataConstants.GPS_COORDINATE_DECIMALS
    gps = ExifGPS(
        latitude=round_half_away(lat_sign * parse_gps_coordinate(raw.gps_latitude), decimals),
        longitude=round_half_away(lon_sign * parse_gps_coordinate(raw.gps_longitude), decimals),
    )

    if raw.gps_altitude:
        try:
            gps.altitude = _format_altitude(raw)
        except RationalFormatError as e:
            logger.debug(f"Skipping GPS altitude '{raw.gps_altitude}': {e}")

    if raw.gps_speed and raw.gps_speed_ref:
        try:
            gps.speed = _format_speed(raw)
        except RationalFormatError as e:
            logger.debug(f"Skipping GPS speed '{raw.gps_speed}': {e}")

    if raw.gps_img_direction:
        try:
            direction = parse_rational(raw.gps_img_direction)
        except RationalFormatError as e:
            logger.debug(f"Skipping GPS direction '{raw.gps_img_direction}': {e}")
        else:
            gps.direction = round_half_away(direction, MetadataConstants.GPS_DIRECTION_DECIMALS)
            gps.direction_ref = DIRECTION_REFERENCES.get(raw.gps_img_direction_ref.upper())

    return gps
