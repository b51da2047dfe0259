"""
Custom exception hierarchy for colorpicker.

## Exception Hierarchy

```
ColorPickerError (base)
├── InvalidFormatError        (also a ValueError)
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `ColorPickerError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Malformed hex input

```python
from colorpicker import hex_to_rgb

hex_to_rgb("FF00")
# InvalidFormatError: Invalid color 'FF00': expected 6 characters, got 4
# Recovery hint: "Expected a 6-digit hex color such as FF8800"
```

See `colorpicker.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import ColorPickerError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .conversion import InvalidFormatError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)

__all__ = [
    # Base
    "ColorPickerError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Conversion
    "InvalidFormatError",
    # Handlers
    "ErrorCollector",
    "collect_errors",
    "format_error_for_display",
    "handle_errors",
    "wrap_pydantic_error",
]
