"""
Pytest configuration and fixtures for Image Gateway tests
"""

import io

import pytest
from PIL import Image
from PIL.TiffImagePlugin import IFDRational

from schemas import RawExif
from services.metadata_service import MetadataService


def encode_image(
    mode: str = "RGB",
    size=(64, 48),
    format: str = "JPEG",
    exif: Image.Exif = None,
) -> bytes:
    """Encode a solid test image, optionally with EXIF tags"""
    image = Image.new(mode, size, color="orange")
    buffer = io.BytesIO()
    if exif is not None:
        image.save(buffer, format=format, exif=exif)
    else:
        image.save(buffer, format=format)
    return buffer.getvalue()


@pytest.fixture
def camera_exif():
    """Base IFD tags as a camera would write them"""
    exif = Image.Exif()
    exif[0x010F] = "Canon"
    exif[0x0110] = "Canon EOS 5D Mark IV"
    exif[0x0112] = 6
    exif[0x011A] = IFDRational(72, 1)
    exif[0x011B] = IFDRational(72, 1)
    exif[0x0128] = 2
    exif[0x0131] = "Darktable 4.4"
    exif[0x0132] = "2023:06:15 10:30:00"
    return exif


@pytest.fixture
def jpeg_bytes():
    """Plain JPEG without EXIF"""
    return encode_image()


@pytest.fixture
def jpeg_with_exif(camera_exif):
    """JPEG carrying base IFD EXIF tags"""
    return encode_image(exif=camera_exif)


@pytest.fixture
def png_rgba_bytes():
    """PNG with an alpha channel"""
    return encode_image(mode="RGBA", format="PNG")


@pytest.fixture
def metadata_service():
    """Create MetadataService instance for testing"""
    return MetadataService(max_upload_bytes=1024 * 1024)


@pytest.fixture
def raw_exif():
    """Raw EXIF record as produced by the extraction layer"""
    return RawExif(
        make="Apple",
        model="iPhone 12 Pro",
        orientation=1,
        x_resolution="72/1",
        y_resolution="72/1",
        resolution_unit=2,
        software="16.5",
        datetime="2023:06:15 10:30:00",
        ycbcr_positioning=1,
        exposure_time="1/250",
        f_number="8/5",
        exposure_program=2,
        iso_speed_ratings=32,
        exif_version="0232",
        datetime_original="2023:06:15 10:29:58",
        datetime_digitized="2023:06:15 10:29:58",
        components_configuration="Y Cb Cr -",
        shutter_speed_value="9965784/1250743",
        aperture_value="14447/10653",
        brightness_value="11817/1097",
        exposure_bias_value="0",
        metering_mode=5,
        flash=0x18,
        focal_length="21/5",
        subject_area="2009 1503 2208 1327",
        color_space=0xFFFF,
        pixel_x_dimension=4032,
        pixel_y_dimension=3024,
        sensing_method=2,
        scene_type="Directly photographed",
        exposure_mode=0,
        focal_length_in_35mm_film=26,
        scene_capture_type=0,
        gps_latitude_ref="S",
        gps_latitude="40/1 26/1 463/10",
        gps_longitude_ref="W",
        gps_longitude="73/1 58/1 12/1",
        gps_altitude_ref="0",
        gps_altitude="1234/10",
        gps_speed_ref="K",
        gps_speed="25/2",
        gps_img_direction_ref="T",
        gps_img_direction="123456/1000",
    )
