"""Colorpicker: color conversion between RGB, HSV, hex and websafe colors."""

__version__ = "0.1.0"

from .converter import (
    HEX_DIGITS,
    WEBSAFE_VALUES,
    dec_to_hex,
    hex_to_dec,
    hex_to_rgb,
    hsv_to_percent,
    hsv_to_rgb,
    hsv_to_rgb_seq,
    hue_to_rgb,
    normalize_hex,
    percent_to_hsv,
    real_to_byte,
    rgb_to_hex,
    rgb_to_hex_seq,
    rgb_to_hsv,
    rgb_to_hsv_seq,
    websafe,
    websafe_seq,
)
from .exceptions import ColorPickerError, InvalidFormatError
from .models import ColorInfo, HSVColor, RGBColor

__all__ = [
    "HEX_DIGITS",
    "WEBSAFE_VALUES",
    # Errors
    "ColorPickerError",
    "InvalidFormatError",
    # Models
    "ColorInfo",
    "HSVColor",
    "RGBColor",
    # Conversions
    "dec_to_hex",
    "hex_to_dec",
    "hex_to_rgb",
    "hsv_to_percent",
    "hsv_to_rgb",
    "hsv_to_rgb_seq",
    "hue_to_rgb",
    "normalize_hex",
    "percent_to_hsv",
    "real_to_byte",
    "rgb_to_hex",
    "rgb_to_hex_seq",
    "rgb_to_hsv",
    "rgb_to_hsv_seq",
    "websafe",
    "websafe_seq",
]
