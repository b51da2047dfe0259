"""Color conversion exceptions.

Conversions are pure arithmetic and never fail on numbers: out-of-range
channels are clamped or reset. The only failure is malformed text or
malformed channel sequences handed to a decoder.
"""

from typing import Any

from .base import ColorPickerError


class InvalidFormatError(ColorPickerError, ValueError):
    """Input cannot be decoded as a color (bad hex string or channel sequence)."""

    def __init__(self, value: Any, reason: str, expected: str = "a 6-digit hex color such as FF8800"):
        """
        Initialize invalid format error.

        Args:
            value: The rejected input
            reason: Why the input was rejected
            expected: Description of the accepted format, used in the hint
        """
        super().__init__(
            user_message=f"Invalid color {value!r}: {reason}",
            technical_message=f"Cannot decode {value!r} ({type(value).__name__}): {reason}",
            recoverable=True,
            recovery_hint=f"Expected {expected}",
        )
        self.value = value
        self.reason = reason
