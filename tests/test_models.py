"""Unit tests for Pydantic models."""

import json

import pytest
from pydantic import ValidationError

from colorpicker.exceptions import ConfigFileInvalidError, ConfigValidationError, InvalidFormatError
from colorpicker.models import AppConfig, ColorInfo, HSVColor, RGBColor


class TestRGBColor:
    """Test RGBColor model."""

    @pytest.mark.unit
    def test_create_color(self):
        color = RGBColor(r=100, g=50, b=25)
        assert color.to_tuple() == (100, 50, 25)

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        """Test that channels must be 0-255."""
        with pytest.raises(ValidationError):
            RGBColor(r=256, g=0, b=0)

        with pytest.raises(ValidationError):
            RGBColor(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_frozen_and_hashable(self):
        color = RGBColor(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 5
        assert len({color, RGBColor(r=1, g=2, b=3)}) == 1

    @pytest.mark.unit
    def test_from_hex(self):
        assert RGBColor.from_hex("#f80") == RGBColor(r=255, g=136, b=0)
        assert RGBColor.from_hex("FF8000") == RGBColor(r=255, g=128, b=0)

    @pytest.mark.unit
    def test_from_hex_invalid(self):
        with pytest.raises(InvalidFormatError):
            RGBColor.from_hex("nope")

    @pytest.mark.unit
    def test_to_hex(self):
        assert RGBColor(r=255, g=0, b=0).to_hex() == "FF0000"

    @pytest.mark.unit
    def test_to_hsv(self):
        assert RGBColor(r=255, g=136, b=0).to_hsv() == HSVColor(h=32, s=1.0, v=1.0)

    @pytest.mark.unit
    def test_websafe(self):
        assert RGBColor(r=255, g=136, b=0).websafe() == RGBColor(r=255, g=153, b=0)


class TestHSVColor:
    """Test HSVColor model."""

    @pytest.mark.unit
    def test_range_validation(self):
        with pytest.raises(ValidationError):
            HSVColor(h=360, s=0.5, v=0.5)

        with pytest.raises(ValidationError):
            HSVColor(h=10, s=1.5, v=0.5)

    @pytest.mark.unit
    def test_to_rgb(self):
        assert HSVColor(h=30, s=1, v=1).to_rgb() == RGBColor(r=255, g=128, b=0)

    @pytest.mark.unit
    def test_to_percent(self):
        assert HSVColor(h=30, s=0.5, v=1).to_percent() == (30, 50, 100)

    @pytest.mark.unit
    def test_from_rgb_black(self):
        assert HSVColor.from_rgb(RGBColor(r=0, g=0, b=0)).to_tuple() == (0, 0, 0)


class TestColorInfo:
    """Test ColorInfo derivation."""

    @pytest.mark.unit
    def test_from_hex(self):
        info = ColorInfo.from_hex("FF8800")
        assert info.rgb == RGBColor(r=255, g=136, b=0)
        assert info.hsv.h == 32
        assert info.hex == "FF8800"
        assert info.websafe == RGBColor(r=255, g=153, b=0)
        assert info.websafe_hex == "FF9900"

    @pytest.mark.unit
    def test_from_rgb_white(self):
        info = ColorInfo.from_rgb(RGBColor(r=255, g=255, b=255))
        assert info.hsv.to_tuple() == (0, 0, 1)
        assert info.hex == "FFFFFF"
        assert info.websafe_hex == "FFFFFF"


class TestAppConfig:
    """Test AppConfig model and its persistence."""

    @pytest.mark.unit
    def test_defaults(self):
        config = AppConfig()
        assert config.hex_prefix is False
        assert config.hsv_percent is False
        assert config.output_format == "text"
        assert config.precision == 3

    @pytest.mark.unit
    def test_validation(self):
        with pytest.raises(ValidationError):
            AppConfig(output_format="xml")

        with pytest.raises(ValidationError):
            AppConfig(precision=11)

    @pytest.mark.unit
    def test_load_missing_returns_default(self, config_path):
        assert AppConfig.load_or_default(config_path) == AppConfig()
        assert not config_path.exists()

    @pytest.mark.unit
    def test_save_and_load(self, config_path):
        AppConfig(hex_prefix=True, output_format="json").save(config_path)

        loaded = AppConfig.load_or_default(config_path)
        assert loaded.hex_prefix is True
        assert loaded.output_format == "json"

    @pytest.mark.unit
    def test_load_invalid_json(self, config_path):
        config_path.write_text("{ invalid json }", encoding="utf-8")

        with pytest.raises(ConfigFileInvalidError):
            AppConfig.load_or_default(config_path)

    @pytest.mark.unit
    def test_load_invalid_value(self, config_path):
        config_path.write_text(json.dumps({"precision": 99}), encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(config_path)

        assert exc_info.value.field == "precision"
        assert str(config_path) in exc_info.value.recovery_hint
