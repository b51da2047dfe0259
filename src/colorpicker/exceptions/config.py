"""Errors raised while loading or changing the settings file.

The settings file is a small JSON object with four keys (see
colorpicker.models.AppConfig). It is either unreadable as JSON
(ConfigFileInvalidError) or readable but holding a bad value
(ConfigValidationError).
"""

from typing import Any, Optional

from .base import ColorPickerError

RESET_HINT = "Run 'colorpicker config reset' to go back to the defaults"

# Accepted values per settings key, shown when that key is rejected
FIELD_HINTS = {
    "hex_prefix": "hex_prefix must be true or false",
    "hsv_percent": "hsv_percent must be true or false",
    "output_format": "Valid output formats: text, json",
    "precision": "precision is the number of decimals, 0-10",
}


class ConfigurationError(ColorPickerError):
    """Settings are invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """The settings file is empty, unreadable, or not valid JSON."""

    def __init__(self, file_path: str, parse_error: str):
        lowered = parse_error.lower()
        if "trailing comma" in lowered:
            user_msg = "Configuration file has a trailing comma"
            recovery = f"Delete the comma after the last key in {file_path}"
        elif "empty" in lowered:
            user_msg = "Configuration file is empty"
            recovery = f"Delete {file_path} or fill it with a JSON object"
        elif "unreadable" in lowered:
            user_msg = "Configuration file could not be read"
            recovery = f"Check that {file_path} is a UTF-8 text file you can read"
        else:
            user_msg = "Configuration file is not valid JSON"
            recovery = f"Fix the JSON in {file_path}"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Cannot parse {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=f"{recovery}\n{RESET_HINT}",
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A settings value is the wrong type or out of range."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        if field in FIELD_HINTS:
            hints = [FIELD_HINTS[field]]
        elif field == "multiple fields":
            hints = ["Fix each value listed above"]
        else:
            hints = [f"Change '{field}' in your settings"]
        if file_path:
            hints.append(f"Config file: {file_path}")
        hints.append(RESET_HINT)

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"{field}={value!r} rejected: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hints),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
