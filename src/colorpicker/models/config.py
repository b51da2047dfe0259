"""Application configuration model."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from colorpicker.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".colorpicker" / "config.json"


class AppConfig(BaseModel):
    """Output preferences for the colorpicker command line tool."""

    model_config = ConfigDict(validate_assignment=True)

    hex_prefix: bool = Field(default=False, description="Print hex colors with a leading '#'")
    hsv_percent: bool = Field(
        default=False,
        description="Show and read saturation/value as 0-100 percentages instead of 0-1 fractions",
    )
    output_format: Literal["text", "json"] = Field(
        default="text", description="Output format for conversion results"
    )
    precision: int = Field(
        default=3, ge=0, le=10, description="Decimal places for fractional HSV output"
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.colorpicker/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
