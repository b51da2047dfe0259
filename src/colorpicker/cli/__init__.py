"""Command line interface for colorpicker."""

from .main import cli

__all__ = ["cli"]
