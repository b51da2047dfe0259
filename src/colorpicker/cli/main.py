"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from colorpicker import __version__
from colorpicker.models import DEFAULT_CONFIG_PATH

from .commands import batch, config, hex2rgb, hsv2rgb, inspect_color, rgb2hex, rgb2hsv, websafe
from .context import CliState

logger = logging.getLogger(__name__)

HANDLER_NAME = "colorpicker"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Optional[Path]:
    """
    Configure logging for the application.

    Output goes to stderr only when -v is given, so conversion results on
    stdout stay clean for pipes. --debug and --log-file add a rotating
    log file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file, if one was configured
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Override with explicit log level if provided
    if log_file:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "colorpicker-debug.log"
    else:
        log_path = log_file

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    # Drop handlers from an earlier invocation in the same process
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = []
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        # Keeps last 5 files, max 10MB each
        handlers.append(logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        ))

    for handler in handlers:
        handler.set_name(HANDLER_NAME)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    root_logger.setLevel(level)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="colorpicker")
@click.option(
    '--config',
    '-c',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Config file to use (default: {DEFAULT_CONFIG_PATH})'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Log to stderr (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./colorpicker-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Color Picker - convert colors between RGB, HSV, hex and websafe.

    \b
    Examples:
      # RGB to HSV and back
      colorpicker rgb2hsv 255 128 0
      colorpicker hsv2rgb 30 1 1

    \b
      # Hex conversions (shorthand and '#' accepted)
      colorpicker rgb2hex 255 128 0
      colorpicker hex2rgb "#f80"

    \b
      # Closest websafe color, or everything at once
      colorpicker websafe 130 20 240
      colorpicker inspect FF8000

    \b
      # Convert a file of hex colors, one per line
      colorpicker batch colors.txt

    \b
      # Output preferences
      colorpicker config set --hex-prefix --format json
    """
    log_path = setup_logging(verbose, debug, log_file, log_level)

    ctx.obj = CliState(
        config_path=config_path or DEFAULT_CONFIG_PATH,
        log_path=log_path,
    )


cli.add_command(rgb2hsv)
cli.add_command(hsv2rgb)
cli.add_command(rgb2hex)
cli.add_command(hex2rgb)
cli.add_command(websafe)
cli.add_command(inspect_color)
cli.add_command(batch)
cli.add_command(config)

if __name__ == "__main__":
    cli()
