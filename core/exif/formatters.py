"""
Scalar formatters for EXIF values.

Render rationals, resolutions and timestamps as compact display strings.
"""

import math
from datetime import datetime

from core.constants import RESOLUTION_SUFFIXES, MetadataConstants
from core.exif.rational import parse_rational_or_zero


def format_float(value: float, max_decimals: int = MetadataConstants.DEFAULT_DECIMALS) -> str:
    """
    Format a float with at most max_decimals digits after the point.

    Trailing zeros and a trailing decimal point are stripped, so 3.00 becomes
    "3" and 3.10 becomes "3.1".
    """
    text = f"{value:.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def round_half_away(value: float, decimals: int) -> float:
    """Round to a number of decimals, with halves rounded away from zero."""
    scale = 10**decimals
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


def format_human_rational(text: str) -> str:
    """
    Format a rational so it reads the way exposure times are usually shown.

    Values of 0.3 and above are rendered as decimals ("0.5", "2"), smaller
    ones as a unit fraction ("1/250").

    Args:
        text: Rational value as text ("N" or "N/D")

    Returns:
        Display string
    """
    value = parse_rational_or_zero(text)
    if value == 0:
        return "0"
    if value >= MetadataConstants.HUMAN_RATIONAL_THRESHOLD:
        return format_float(value, 2)

    denominator = int(0.5 + 1 / value)
    return f"1/{denominator}"


def format_resolution(text: str, unit: int) -> str:
    """Format an X/Y resolution, suffixed with " ppi" or " ppcm" for known units."""
    formatted = format_float(parse_rational_or_zero(text), 2)
    return formatted + RESOLUTION_SUFFIXES.get(unit, "")


def format_datetime(text: str) -> str:
    """
    Convert a camera timestamp "YYYY:MM:DD HH:MM:SS" to "YYYY-MM-DDTHH:MM:SS".

    No timezone offset is emitted since none is recorded. Returns an empty
    string when the value does not match the camera layout.
    """
    try:
        parsed = datetime.strptime(text, MetadataConstants.EXIF_DATETIME_FORMAT)
    except ValueError:
        return ""
    return parsed.strftime(MetadataConstants.OUTPUT_DATETIME_FORMAT)
