"""
Config command group.

Commands:
    - config show [--field FIELD]     # Display configuration
    - config set --option VALUE ...   # Update configuration
    - config reset [--yes]            # Restore defaults
    - config path                     # Print the config file location
"""

import logging
from typing import Optional

import click
from pydantic import ValidationError

from colorpicker.exceptions import wrap_pydantic_error
from colorpicker.models import AppConfig

from ..context import CliState, pass_state, report_errors

logger = logging.getLogger(__name__)


@click.group(name="config")
def config():
    """Configure colorpicker output settings."""
    pass


@config.command(name="show")
@click.option(
    "--field",
    "-f",
    type=click.Choice(list(AppConfig.model_fields)),
    default=None,
    help="Show a single field",
)
@pass_state
@report_errors("show configuration")
def show(state: CliState, field: Optional[str]):
    """Display the current configuration."""
    current = state.config

    if field:
        click.echo(current.model_dump(mode="json")[field])
        return

    click.echo(f"Configuration ({state.config_path}):\n")
    for name, value in current.model_dump(mode="json").items():
        description = AppConfig.model_fields[name].description
        click.echo(f"  {name}: {value}")
        click.echo(f"      {description}")


@config.command(name="set")
@click.option("--hex-prefix/--no-hex-prefix", default=None, help="Print hex colors with a leading '#'")
@click.option(
    "--hsv-percent/--hsv-fraction",
    default=None,
    help="Show saturation/value as 0-100 percentages or 0-1 fractions",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default=None,
    help="Output format for conversion results",
)
@click.option("--precision", "-p", type=int, default=None, help="Decimal places for fractional HSV output (0-10)")
@pass_state
@report_errors("update configuration")
def set_values(
    state: CliState,
    hex_prefix: Optional[bool],
    hsv_percent: Optional[bool],
    output_format: Optional[str],
    precision: Optional[int],
):
    """Update configuration values and save them."""
    updates = {
        "hex_prefix": hex_prefix,
        "hsv_percent": hsv_percent,
        "output_format": output_format.lower() if output_format else None,
        "precision": precision,
    }
    updates = {name: value for name, value in updates.items() if value is not None}

    if not updates:
        raise click.UsageError("Nothing to set. See 'colorpicker config set --help'.")

    try:
        updated = AppConfig.model_validate({**state.config.model_dump(), **updates})
    except ValidationError as e:
        raise wrap_pydantic_error(e, str(state.config_path)) from e

    updated.save(state.config_path)
    logger.info(f"Updated configuration: {updates}")

    for name, value in updated.model_dump(mode="json").items():
        if name in updates:
            click.echo(f"{name} = {value}")


@config.command(name="reset")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@pass_state
@report_errors("reset configuration")
def reset(state: CliState, yes: bool):
    """Restore the default configuration (works on a corrupt file too)."""
    if not yes:
        click.confirm(f"Reset {state.config_path} to defaults?", abort=True)

    AppConfig().save(state.config_path)
    logger.info(f"Reset configuration at {state.config_path}")
    click.echo("Configuration reset to defaults")


@config.command(name="path")
@pass_state
def path(state: CliState):
    """Print the location of the config file."""
    click.echo(str(state.config_path))
