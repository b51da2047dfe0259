"""State shared by all CLI commands and the error reporting wrapper."""

import logging
import sys
from dataclasses import dataclass, field
from functools import wraps
from pathlib import Path
from typing import Callable, Optional

import click

from colorpicker.exceptions import ColorPickerError, format_error_for_display, handle_errors
from colorpicker.models import AppConfig

from .formatting import OutputFormatter

logger = logging.getLogger(__name__)


@dataclass
class CliState:
    """Per-invocation state; the config file is only read when a command needs it."""

    config_path: Path
    log_path: Optional[Path] = None
    _config: Optional[AppConfig] = field(default=None, repr=False)

    @property
    def config(self) -> AppConfig:
        if self._config is None:
            self._config = AppConfig.load_or_default(self.config_path)
        return self._config

    @property
    def output(self) -> OutputFormatter:
        return OutputFormatter(self.config)


pass_state = click.make_pass_decorator(CliState)


def show_error(error: Exception, log_path: Optional[Path] = None) -> None:
    """Print a clean error message and recovery hint to stderr."""
    user_message, recovery_hint = format_error_for_display(error)

    click.echo(f"Error: {user_message}", err=True)
    if recovery_hint:
        click.echo(recovery_hint, err=True)
    if log_path:
        click.echo(f"For details, check the log file: {log_path}", err=True)


def report_errors(operation_name: str) -> Callable:
    """
    Decorator for command callbacks.

    Application errors are logged, shown without a traceback and turned
    into exit code 1. Anything else propagates.
    """
    def decorator(func: Callable) -> Callable:
        logged = handle_errors(operation_name=operation_name, log_level=logging.DEBUG)(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return logged(*args, **kwargs)
            except ColorPickerError as e:
                ctx = click.get_current_context(silent=True)
                state = ctx.find_object(CliState) if ctx else None
                show_error(e, state.log_path if state else None)
                sys.exit(1)

        return wrapper
    return decorator
