"""Single color conversion commands."""

import logging
import math
from typing import Optional

import click

from colorpicker import converter
from colorpicker.models import ColorInfo, RGBColor

from ..context import CliState, pass_state, report_errors

logger = logging.getLogger(__name__)

CHANNEL = click.IntRange(0, 255)


@click.command(name="rgb2hsv")
@click.argument("red", type=CHANNEL)
@click.argument("green", type=CHANNEL)
@click.argument("blue", type=CHANNEL)
@pass_state
@report_errors("convert RGB to HSV")
def rgb2hsv(state: CliState, red: int, green: int, blue: int):
    """Convert RGB channels (0-255) to hue, saturation and value."""
    hsv = converter.rgb_to_hsv(red, green, blue)
    out = state.output
    out.emit(out.hsv_record(hsv), out.hsv(hsv))


@click.command(name="hsv2rgb")
@click.argument("hue", type=float)
@click.argument("saturation", type=float)
@click.argument("value", type=float)
@click.option(
    "--percent/--fraction",
    default=None,
    help="Read saturation and value as 0-100 or 0-1 (default: from config)",
)
@pass_state
@report_errors("convert HSV to RGB")
def hsv2rgb(state: CliState, hue: float, saturation: float, value: float, percent: Optional[bool]):
    """
    Convert hue (degrees), saturation and value to RGB.

    Hue may be any angle; it wraps around the color wheel.
    """
    if percent is None:
        percent = state.config.hsv_percent

    if not math.isfinite(hue):
        raise click.BadParameter(f"{hue:g} is not a finite angle.", param_hint="HUE")

    upper = 100 if percent else 1
    for name, amount in (("saturation", saturation), ("value", value)):
        if not 0 <= amount <= upper:
            raise click.BadParameter(f"{amount:g} is not in the range 0-{upper}.", param_hint=name.upper())

    if percent:
        hue, saturation, value = converter.percent_to_hsv(hue, saturation, value)

    rgb = converter.hsv_to_rgb(hue, saturation, value)
    out = state.output
    out.emit(out.rgb_record(rgb), out.rgb(rgb))


@click.command(name="rgb2hex")
@click.argument("red", type=CHANNEL)
@click.argument("green", type=CHANNEL)
@click.argument("blue", type=CHANNEL)
@pass_state
@report_errors("convert RGB to hex")
def rgb2hex(state: CliState, red: int, green: int, blue: int):
    """Convert RGB channels (0-255) to a hex color."""
    out = state.output
    hex_value = out.hex(converter.rgb_to_hex(red, green, blue))
    out.emit({"hex": hex_value}, hex_value)


@click.command(name="hex2rgb")
@click.argument("color")
@pass_state
@report_errors("convert hex to RGB")
def hex2rgb(state: CliState, color: str):
    """
    Convert a hex color to RGB.

    Accepts 6 digits or 3 digit shorthand, with or without '#'
    (quote '#' in most shells).
    """
    rgb = converter.hex_to_rgb(converter.normalize_hex(color))
    out = state.output
    out.emit(out.rgb_record(rgb), out.rgb(rgb))


@click.command(name="websafe")
@click.argument("red", type=float)
@click.argument("green", type=float)
@click.argument("blue", type=float)
@pass_state
@report_errors("find websafe color")
def websafe(state: CliState, red: float, green: float, blue: float):
    """
    Snap a color to the closest websafe color.

    Channels outside 0-255 are clamped first.
    """
    rgb = converter.websafe(red, green, blue)
    out = state.output
    record = out.rgb_record(rgb)
    record["hex"] = out.hex(converter.rgb_to_hex(*rgb))
    out.emit(record, out.rgb(rgb))


@click.command(name="inspect")
@click.argument("color", required=False)
@click.option(
    "--rgb",
    "rgb",
    type=CHANNEL,
    nargs=3,
    default=None,
    help="Inspect an RGB color instead of a hex color",
)
@pass_state
@report_errors("inspect color")
def inspect_color(state: CliState, color: Optional[str], rgb: Optional[tuple[int, int, int]]):
    """
    Show every representation of a color: RGB, HSV, hex and the closest websafe color.

    \b
    Examples:
      colorpicker inspect FF8000
      colorpicker inspect "#f80"
      colorpicker inspect --rgb 255 128 0
    """
    if color is not None and rgb:
        raise click.UsageError("Give either COLOR or --rgb, not both.")

    if rgb:
        r, g, b = rgb
        info = ColorInfo.from_rgb(RGBColor(r=r, g=g, b=b))
    elif color is not None:
        info = ColorInfo.from_hex(color)
    else:
        raise click.UsageError("Missing COLOR or --rgb.")

    logger.debug(f"Inspected {info.hex}")
    out = state.output
    out.emit(out.info_record(info), out.info_text(info))
