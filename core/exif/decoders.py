"""
Enumeration decoders for EXIF numeric codes.

Each decoder maps a small integer code to a descriptive label through a
static table. Codes with no table entry are passed through unchanged, so the
result is either a label (str) or the raw code (int). A table entry of None
explicitly clears the field.
"""

from typing import Dict, Optional, Tuple, Union

DecodedValue = Union[str, int]
FlashMode = Union[str, bool]

EXPOSURE_PROGRAMS: Dict[int, Optional[str]] = {
    0: None,  # Not defined
    1: "Manual",
    2: "Program AE",
    3: "Aperture-priority AE",
    4: "Shutter speed priority AE",
    5: "Creative (Slow speed)",
    6: "Action (High speed)",
    7: "Portrait",
    8: "Landscape",
    9: "Bulb",
}

METERING_MODES: Dict[int, Optional[str]] = {
    0: None,  # Unknown
    1: "Average",
    2: "Center-weighted average",
    3: "Spot",
    4: "Multi-spot",
    5: "Multi-segment",
    6: "Partial",
    255: "Other",
}

COMPRESSIONS: Dict[int, str] = {
    1: "Uncompressed",
    2: "CCITT 1D",
    3: "T4/Group 3 Fax",
    4: "T6/Group 4 Fax",
    5: "LZW",
    6: "JPEG (old-style)",
    7: "JPEG",
    8: "Adobe Deflate",
    9: "JBIG B&W",
    10: "JBIG Color",
    99: "JPEG",
    262: "Kodak 262",
    32766: "Next",
    32767: "Sony ARW Compressed",
    32769: "Packed RAW",
    32770: "Samsung SRW Compressed",
    32771: "CCIRLEW",
    32772: "Samsung SRW Compressed 2",
    32773: "PackBits",
    32809: "Thunderscan",
    32867: "Kodak KDC Compressed",
    32895: "IT8CTPAD",
    32896: "IT8LW",
    32897: "IT8MP",
    32898: "IT8BL",
    32908: "PixarFilm",
    32909: "PixarLog",
    32946: "Deflate",
    32947: "DCS",
    33003: "Aperio JPEG 2000 YCbCr",
    33005: "Aperio JPEG 2000 RGB",
    34661: "JBIG",
    34676: "SGILog",
    34677: "SGILog24",
    34712: "JPEG 2000",
    34713: "Nikon NEF Compressed",
    34715: "JBIG2 TIFF FX",
    34718: "Microsoft Document Imaging (MDI) Binary Level Codec",
    34719: "Microsoft Document Imaging (MDI) Progressive Transform Codec",
    34720: "Microsoft Document Imaging (MDI) Vector",
    34887: "ESRI Lerc",
    34892: "Lossy JPEG",
    34925: "LZMA2",
    34926: "Zstd",
    34927: "WebP",
    34933: "PNG",
    34934: "JPEG XR",
    65000: "Kodak DCR Compressed",
    65535: "Pentax PEF Compressed",
}

COLOR_SPACES: Dict[int, str] = {
    0x1: "sRGB",
    0x2: "Adobe RGB",
    0xFFFD: "Wide Gamut RGB",
    0xFFFE: "ICC Profile",
    0xFFFF: "Uncalibrated",
}

SENSING_METHODS: Dict[int, str] = {
    1: "Not defined",
    2: "One-chip color area",
    3: "Two-chip color area",
    4: "Three-chip color area",
    5: "Color sequential area",
    7: "Trilinear",
    8: "Color sequential linear",
}

EXPOSURE_MODES: Dict[int, str] = {
    0: "Auto",
    1: "Manual",
    2: "Auto bracket",
}

# Bit 0 fired, bits 1-2 return light, bits 3-4 mode, bit 5 no flash function,
# bit 6 red-eye reduction
FLASH_MODES: Dict[int, str] = {
    0x00: "No Flash",
    0x01: "Fired",
    0x05: "Fired, Return not detected",
    0x07: "Fired, Return detected",
    0x08: "On, Did not fire",
    0x09: "On, Fired",
    0x0D: "On, Return not detected",
    0x0F: "On, Return detected",
    0x10: "Off, Did not fire",
    0x14: "Off, Did not fire, Return not detected",
    0x18: "Auto, Did not fire",
    0x19: "Auto, Fired",
    0x1D: "Auto, Fired, Return not detected",
    0x1F: "Auto, Fired, Return detected",
    0x20: "No flash function",
    0x30: "Off, No flash function",
    0x41: "Fired, Red-eye reduction",
    0x45: "Fired, Red-eye reduction, Return not detected",
    0x47: "Fired, Red-eye reduction, Return detected",
    0x49: "On, Red-eye reduction",
    0x4D: "On, Red-eye reduction, Return not detected",
    0x4F: "On, Red-eye reduction, Return detected",
    0x50: "Off, Red-eye reduction",
    0x58: "Auto, Did not fire, Red-eye reduction",
    0x59: "Auto, Fired, Red-eye reduction",
    0x5D: "Auto, Fired, Red-eye reduction, Return not detected",
    0x5F: "Auto, Fired, Red-eye reduction, Return detected",
}

DECODER_TABLES: Dict[str, Dict[int, Optional[str]]] = {
    "exposureProgram": EXPOSURE_PROGRAMS,
    "meteringMode": METERING_MODES,
    "compression": COMPRESSIONS,
    "colorSpace": COLOR_SPACES,
    "sensingMethod": SENSING_METHODS,
    "exposureMode": EXPOSURE_MODES,
    "flashMode": FLASH_MODES,
}


def decode_or_passthrough(code: int, table: Dict[int, Optional[str]]) -> Optional[DecodedValue]:
    """
    Look up a code in a decoder table.

    Args:
        code: Raw EXIF code
        table: Mapping of code to label (None clears the field)

    Returns:
        The label, None for an explicitly cleared code, or the code itself
        when the table has no entry for it

    Example:
        >>> decode_or_passthrough(99, COMPRESSIONS)
        'JPEG'
        >>> decode_or_passthrough(40000, COMPRESSIONS)
        40000
    """
    if code in table:
        return table[code]
    return code


def decode_exposure_program(code: int) -> Optional[DecodedValue]:
    return decode_or_passthrough(code, EXPOSURE_PROGRAMS)


def decode_metering_mode(code: int) -> Optional[DecodedValue]:
    return decode_or_passthrough(code, METERING_MODES)


def decode_compression(code: int) -> Optional[DecodedValue]:
    return decode_or_passthrough(code, COMPRESSIONS)


def decode_color_space(code: int) -> Optional[DecodedValue]:
    return decode_or_passthrough(code, COLOR_SPACES)


def decode_sensing_method(code: int) -> Optional[DecodedValue]:
    return decode_or_passthrough(code, SENSING_METHODS)


def decode_exposure_mode(code: int) -> Optional[DecodedValue]:
    return decode_or_passthrough(code, EXPOSURE_MODES)


def decode_flash(code: int) -> Tuple[bool, FlashMode]:
    """
    Decode the Flash bit pattern.

    The fired flag is bit 0 and is meaningful even for code 0. Patterns
    missing from the table fall back to the fired flag itself as the mode.

    Returns:
        Tuple of (fired, mode label or fired flag)
    """
    fired = (code & 1) == 1
    return fired, FLASH_MODES.get(code, fired)
