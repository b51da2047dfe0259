"""CLI commands for colorpicker."""

from .batch import batch
from .config import config
from .convert import hex2rgb, hsv2rgb, inspect_color, rgb2hex, rgb2hsv, websafe

__all__ = [
    "batch",
    "config",
    "hex2rgb",
    "hsv2rgb",
    "inspect_color",
    "rgb2hex",
    "rgb2hsv",
    "websafe",
]
