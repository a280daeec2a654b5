"""
EXIF rational parsing.

Rational tags arrive as text, either "N" or "N/D". The strict parser raises
RationalFormatError on malformed input; the lenient variant logs the problem
and returns 0 so that one bad tag never aborts metadata assembly.
"""

import logging

logger = logging.getLogger(__name__)


class RationalFormatError(ValueError):
    """Raised when a rational tag value is malformed."""


def parse_rational(text: str) -> float:
    """
    Parse a rational number encoded as "N" or "N/D".

    A zero numerator short-circuits: the denominator is neither parsed nor
    validated, so "0/0" yields 0.

    Args:
        text: Rational value as text (surrounding whitespace is ignored)

    Returns:
        Value as float (0 for blank input)

    Raises:
        RationalFormatError: If the value has more than one slash, an empty
            numerator, a non-numeric part, or a zero denominator with a
            nonzero numerator
    """
    text = text.strip()
    if not text:
        return 0.0

    parts = text.split("/")
    if len(parts) > 2:
        raise RationalFormatError("invalid value: more than 1 slash found")

    if not parts[0]:
        raise RationalFormatError("invalid value: numerator is empty")
    try:
        numerator = float(parts[0])
    except ValueError:
        raise RationalFormatError(f"invalid numerator: {parts[0]!r}") from None

    if len(parts) == 1 or numerator == 0:
        return numerator

    try:
        denominator = float(parts[1])
    except ValueError:
        raise RationalFormatError(f"invalid denominator: {parts[1]!r}") from None
    if denominator == 0:
        raise RationalFormatError("invalid value: denominator is 0")

    return numerator / denominator


def parse_rational_or_zero(text: str) -> float:
    """Like parse_rational, but logs format errors and returns 0 instead."""
    try:
        return parse_rational(text)
    except RationalFormatError as e:
        logger.warning(f"Failed to parse EXIF rational value '{text}': {e}")
        return 0.0
