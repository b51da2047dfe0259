"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from click.testing import CliRunner

from colorpicker.cli import cli


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir):
    """Config file location inside the temporary directory (not created)."""
    return temp_dir / "config.json"


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner, config_path):
    """Run the CLI against the temporary config file."""
    def _invoke(*args, **kwargs):
        return runner.invoke(cli, ["--config", str(config_path), *args], **kwargs)

    return _invoke
