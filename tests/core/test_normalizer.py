"""
Tests for the EXIF normalizer
"""

import logging

import pytest

from core.exif.normalizer import normalize_exif, parse_subject_area
from schemas import RawExif


class TestParseSubjectArea:
    """Test SubjectArea parsing"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("100 200", [100, 200]),
            ("100 200 50", [100, 200, 50]),
            ("2009 1503 2208 1327", [2009, 1503, 2208, 1327]),
            ("10 20 30 abc", [10, 20, 30]),
            ("abc 20", [20]),
        ],
    )
    def test_valid(self, text, expected):
        """Test integer tokens are kept in order, others dropped"""
        assert parse_subject_area(text) == expected

    @pytest.mark.parametrize("text", ["5", "1 2 3 4 5", "a b", "x y z w"])
    def test_discarded(self, text):
        """Test out-of-bounds token counts and all-invalid input are discarded"""
        assert parse_subject_area(text) is None

    def test_bound_uses_token_count_before_filtering(self):
        """Test the 2..4 bound is checked before invalid tokens are dropped"""
        assert parse_subject_area("1 2 3 x y") is None
        assert parse_subject_area("1 x") == [1]


class TestNormalizeExif:
    """Test the assembled normalized record"""

    def test_full_record(self, raw_exif):
        """Test every populated tag is normalized"""
        res = normalize_exif(raw_exif)

        assert res.make == "Apple"
        assert res.model == "iPhone 12 Pro"
        assert res.orientation == 1
        assert res.software == "16.5"
        assert res.ycbcr_positioning == 1
        assert res.exif_version == "0232"
        assert res.iso == 32
        assert res.components_configuration == "Y Cb Cr -"
        assert res.focal_length_in_35mm_film == 26
        assert res.exif_image_width == 4032
        assert res.exif_image_height == 3024
        assert res.x_resolution == "72 ppi"
        assert res.y_resolution == "72 ppi"
        assert res.date_time == "2023-06-15T10:30:00"
        assert res.date_time_original == "2023-06-15T10:29:58"
        assert res.date_time_digitized == "2023-06-15T10:29:58"
        assert res.f_number == "1.6"
        assert res.exposure_time == "1/250"
        assert res.exposure_program == "Program AE"
        assert res.shutter_speed_value == "7.97"
        assert res.aperture_value == "1.36"
        assert res.brightness_value == "10.77"
        assert res.metering_mode == "Multi-segment"
        assert res.flash is False
        assert res.flash_mode == "Auto, Did not fire"
        assert res.focal_length == "4.2"
        assert res.subject_area == [2009, 1503, 2208, 1327]
        assert res.color_space == "Uncalibrated"
        assert res.sensing_method == "One-chip color area"
        assert res.scene_type == "Directly photographed"

    def test_gps(self, raw_exif):
        """Test the GPS sub-record is attached"""
        gps = normalize_exif(raw_exif).gps

        assert gps.latitude == -40.44619
        assert gps.longitude == -73.97
        assert gps.altitude == "123 m"
        assert gps.speed == "12.5 km/h"
        assert gps.direction == 123.46
        assert gps.direction_ref == "True North"

    def test_zero_codes_are_omitted(self, raw_exif):
        """Test codes of 0 skip their decoder and stay absent"""
        res = normalize_exif(raw_exif)

        assert res.exposure_mode is None
        assert res.scene_capture_type is None
        assert res.compression is None

    def test_zero_exposure_bias_is_omitted(self, raw_exif):
        assert normalize_exif(raw_exif).exposure_compensation is None

    def test_exposure_compensation(self):
        res = normalize_exif(RawExif(exposure_bias_value="2/3"))
        assert res.exposure_compensation == "0.67"

    def test_empty_record(self):
        """Test an empty record only carries the flash fields"""
        res = normalize_exif(RawExif())

        assert res.to_json_dict() == {"flash": False, "flashMode": "No Flash"}

    def test_unknown_codes_pass_through(self):
        """Test unknown codes are emitted as raw integers"""
        res = normalize_exif(
            RawExif(
                exposure_program=42,
                metering_mode=9,
                compression=40000,
                color_space=3,
                sensing_method=6,
                exposure_mode=5,
                flash=0x02,
            )
        )

        assert res.exposure_program == 42
        assert res.metering_mode == 9
        assert res.compression == 40000
        assert res.color_space == 3
        assert res.sensing_method == 6
        assert res.exposure_mode == 5
        assert res.flash is False
        assert res.flash_mode is False

    def test_negative_codes_are_omitted(self):
        res = normalize_exif(RawExif(metering_mode=-1, compression=-7))

        assert res.metering_mode is None
        assert res.compression is None

    def test_flash_fired(self):
        res = normalize_exif(RawExif(flash=0x19))

        assert res.flash is True
        assert res.flash_mode == "Auto, Fired"

    def test_invalid_timestamps_are_omitted(self):
        """Test timestamps not matching the camera layout are dropped"""
        res = normalize_exif(
            RawExif(
                datetime="garbage",
                datetime_original="2023:06:15 10:30:00",
                datetime_digitized="0000:00:00 00:00:00",
            )
        )

        assert res.date_time is None
        assert res.date_time_original == "2023-06-15T10:30:00"
        assert res.date_time_digitized is None

    def test_invalid_gps_reference_keeps_other_fields(self, raw_exif):
        """Test a dropped GPS record does not affect the rest of the record"""
        raw = raw_exif.model_copy(update={"gps_latitude_ref": "X"})
        res = normalize_exif(raw)

        assert res.gps is None
        assert res.make == "Apple"

    def test_malformed_rational_degrades(self, caplog):
        """Test a malformed rational logs and degrades to zero"""
        with caplog.at_level(logging.WARNING):
            res = normalize_exif(RawExif(focal_length="5/0", make="Nikon"))

        assert res.focal_length == "0"
        assert res.make == "Nikon"
        assert "5/0" in caplog.text

    def test_resolution_without_unit(self):
        res = normalize_exif(RawExif(x_resolution="300/1", y_resolution="300/1", resolution_unit=3))

        assert res.x_resolution == "300 ppcm"
        assert res.y_resolution == "300 ppcm"

    def test_deterministic(self, raw_exif):
        """Test normalizing the same record twice yields identical JSON"""
        first = normalize_exif(raw_exif).model_dump_json(by_alias=True, exclude_none=True)
        second = normalize_exif(raw_exif).model_dump_json(by_alias=True, exclude_none=True)

        assert first == second

    def test_raw_record_is_not_mutated(self, raw_exif):
        before = raw_exif.model_dump()
        normalize_exif(raw_exif)

        assert raw_exif.model_dump() == before


class TestJSONRepresentation:
    """Test the serialized record"""

    def test_aliases(self, raw_exif):
        """Test fields are emitted under camelCase names"""
        data = normalize_exif(raw_exif).to_json_dict()

        assert data["ycbcrPositioning"] == 1
        assert data["focalLengthIn35mmFilm"] == 26
        assert data["dateTimeOriginal"] == "2023-06-15T10:29:58"
        assert data["xResolution"] == "72 ppi"
        assert data["fNumber"] == "1.6"
        assert data["exifImageWidth"] == 4032
        assert data["flashMode"] == "Auto, Did not fire"
        assert data["gps"]["directionRef"] == "True North"

    def test_absent_fields_are_not_null(self, raw_exif):
        """Test omitted fields are missing rather than null"""
        data = normalize_exif(raw_exif).to_json_dict()

        assert None not in data.values()
        assert "exposureMode" not in data
        assert "exposureCompensation" not in data

    def test_gps_optional_fields_omitted(self):
        raw = RawExif(
            gps_latitude="1/1 0/1 0/1",
            gps_latitude_ref="N",
            gps_longitude="2/1 0/1 0/1",
            gps_longitude_ref="E",
        )
        data = normalize_exif(raw).to_json_dict()

        assert data["gps"] == {"latitude": 1.0, "longitude": 2.0}

    def test_passthrough_code_type(self):
        """Test passthrough codes serialize as numbers"""
        data = normalize_exif(RawExif(compression=40000, flash=0x02)).to_json_dict()

        assert data["compression"] == 40000
        assert data["flashMode"] is False
