"""
EXIF metadata models.

This module contains the records flowing through the metadata engine:
- RawExif: loosely-typed tag values as produced by the extraction layer
- ExifMetadata / ExifGPS: the normalized, JSON-ready record
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

# Label | RawCode; absence is None and is never serialized
EnumValue = Union[StrictStr, StrictInt]
FlashModeValue = Union[StrictStr, StrictBool]


class RawExif(BaseModel):
    """
    Raw EXIF record.

    Rational tags are text ("N" or "N/D", space separated for multi-component
    values), codes are plain integers. Empty string and 0 mean the tag is
    absent.
    """

    model_config = ConfigDict(extra="ignore")

    make: str = ""
    model: str = ""
    orientation: int = 0
    x_resolution: str = ""
    y_resolution: str = ""
    resolution_unit: int = 0
    software: str = ""
    datetime: str = ""
    ycbcr_positioning: int = 0
    compression: int = 0

    exposure_time: str = ""
    f_number: str = ""
    exposure_program: int = 0
    iso_speed_ratings: int = 0
    exif_version: str = ""
    datetime_original: str = ""
    datetime_digitized: str = ""
    components_configuration: str = ""
    shutter_speed_value: str = ""
    aperture_value: str = ""
    brightness_value: str = ""
    exposure_bias_value: str = ""
    metering_mode: int = 0
    flash: int = 0
    focal_length: str = ""
    subject_area: str = ""
    color_space: int = 0
    pixel_x_dimension: int = 0
    pixel_y_dimension: int = 0
    sensing_method: int = 0
    scene_type: str = ""
    exposure_mode: int = 0
    focal_length_in_35mm_film: int = 0
    scene_capture_type: int = 0

    gps_latitude_ref: str = ""
    gps_latitude: str = ""
    gps_longitude_ref: str = ""
    gps_longitude: str = ""
    gps_altitude_ref: str = ""
    gps_altitude: str = ""
    gps_speed_ref: str = ""
    gps_speed: str = ""
    gps_img_direction_ref: str = ""
    gps_img_direction: str = ""


class ExifGPS(BaseModel):
    """Decoded GPS position"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    latitude: float = Field(..., description="Signed decimal degrees, 5 decimals")
    longitude: float = Field(..., description="Signed decimal degrees, 5 decimals")
    altitude: Optional[str] = Field(None, description="Altitude in meters, e.g. '35 m'")
    speed: Optional[str] = Field(None, description="Speed with unit, e.g. '12.5 km/h'")
    direction: Optional[float] = Field(None, description="Image direction in degrees")
    direction_ref: Optional[str] = Field(None, description="True North or Magnetic North")


class ExifMetadata(BaseModel):
    """
    Normalized EXIF record.

    Every field is optional; fields whose raw tag was absent stay None and are
    left out of the JSON representation.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    make: Optional[str] = None
    model: Optional[str] = None
    orientation: Optional[int] = None
    software: Optional[str] = None
    ycbcr_positioning: Optional[int] = None
    exif_version: Optional[str] = None
    iso: Optional[int] = None
    components_configuration: Optional[str] = None
    focal_length_in_35mm_film: Optional[int] = Field(None, alias="focalLengthIn35mmFilm")
    exif_image_width: Optional[int] = None
    exif_image_height: Optional[int] = None
    x_resolution: Optional[str] = None
    y_resolution: Optional[str] = None
    date_time: Optional[str] = None
    date_time_original: Optional[str] = None
    date_time_digitized: Optional[str] = None
    f_number: Optional[str] = None
    exposure_time: Optional[str] = None
    exposure_program: Optional[EnumValue] = None
    shutter_speed_value: Optional[str] = None
    aperture_value: Optional[str] = None
    brightness_value: Optional[str] = None
    exposure_compensation: Optional[str] = None
    metering_mode: Optional[EnumValue] = None
    compression: Optional[EnumValue] = None
    flash: bool = False
    flash_mode: Optional[FlashModeValue] = None
    focal_length: Optional[str] = None
    subject_area: Optional[List[int]] = None
    color_space: Optional[EnumValue] = None
    sensing_method: Optional[EnumValue] = None
    exposure_mode: Optional[EnumValue] = None
    scene_type: Optional[str] = None
    scene_capture_type: Optional[int] = None
    gps: Optional[ExifGPS] = None

    def to_json_dict(self) -> Dict[str, Any]:
        """Dump using the camelCase names, leaving out absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
