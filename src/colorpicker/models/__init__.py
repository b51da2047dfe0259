"""Data models for colorpicker."""

from .color import ColorInfo, HSVColor, RGBColor
from .config import DEFAULT_CONFIG_PATH, AppConfig

__all__ = [
    "AppConfig",
    "ColorInfo",
    "DEFAULT_CONFIG_PATH",
    "HSVColor",
    "RGBColor",
]
