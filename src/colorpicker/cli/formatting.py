"""Rendering conversion results as text or JSON according to AppConfig."""

import json
from collections.abc import Sequence
from typing import Any

import click

from colorpicker import converter
from colorpicker.models import AppConfig, ColorInfo


class OutputFormatter:
    """Formats colors for the terminal using the user's output preferences."""

    def __init__(self, config: AppConfig):
        self.config = config

    @property
    def is_json(self) -> bool:
        return self.config.output_format == "json"

    def hex(self, value: str) -> str:
        return f"#{value}" if self.config.hex_prefix else value

    def rgb(self, rgb: Sequence[int]) -> str:
        r, g, b = rgb
        return f"{r}, {g}, {b}"

    def hsv_values(self, hsv: Sequence[float]) -> tuple[float, float, float]:
        """HSV as it should be shown: percentages or rounded fractions."""
        h, s, v = hsv
        if self.config.hsv_percent:
            return converter.hsv_to_percent(h, s, v)
        return h, round(s, self.config.precision), round(v, self.config.precision)

    def hsv(self, hsv: Sequence[float]) -> str:
        h, s, v = self.hsv_values(hsv)
        if self.config.hsv_percent:
            return f"{h:g}, {s}%, {v}%"
        precision = self.config.precision
        return f"{h:g}, {s:.{precision}f}, {v:.{precision}f}"

    def rgb_record(self, rgb: Sequence[int]) -> dict[str, int]:
        r, g, b = rgb
        return {"r": r, "g": g, "b": b}

    def hsv_record(self, hsv: Sequence[float]) -> dict[str, float]:
        h, s, v = self.hsv_values(hsv)
        return {"h": h, "s": s, "v": v}

    def info_record(self, info: ColorInfo) -> dict[str, Any]:
        return {
            "rgb": self.rgb_record(info.rgb.to_tuple()),
            "hsv": self.hsv_record(info.hsv.to_tuple()),
            "hex": self.hex(info.hex),
            "websafe": self.rgb_record(info.websafe.to_tuple()),
            "websafe_hex": self.hex(info.websafe_hex),
        }

    def info_text(self, info: ColorInfo) -> str:
        return "\n".join(
            [
                f"RGB:     {self.rgb(info.rgb.to_tuple())}",
                f"HSV:     {self.hsv(info.hsv.to_tuple())}",
                f"Hex:     {self.hex(info.hex)}",
                f"Websafe: {self.rgb(info.websafe.to_tuple())} ({self.hex(info.websafe_hex)})",
            ]
        )

    def emit(self, record: dict[str, Any], text: str) -> None:
        """Print the JSON record or the text line, whichever is configured."""
        if self.is_json:
            click.echo(json.dumps(record))
        else:
            click.echo(text)
