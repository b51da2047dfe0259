"""Base exception class for colorpicker.

Every error the library or the CLI raises on purpose derives from
ColorPickerError, so callers can catch them all in one place. Each one
carries two messages: a short one for the person at the terminal and a
detailed one for the log.
"""

from typing import Optional


class ColorPickerError(Exception):
    """
    Base exception for all colorpicker errors.

    Attributes:
        user_message: Human-friendly message for display
        technical_message: Detailed message for logging
        recoverable: True when fixing the input and retrying will work
        recovery_hint: Optional hint for how to fix the issue
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
