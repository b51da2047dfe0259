"""Convert a list of hex colors in one go."""

import logging
import sys
from typing import TextIO

import click

from colorpicker.exceptions import collect_errors
from colorpicker.models import ColorInfo

from ..context import CliState, pass_state, report_errors

logger = logging.getLogger(__name__)


@click.command(name="batch")
@click.argument("source", type=click.File("r"), default="-")
@pass_state
@report_errors("convert batch")
def batch(state: CliState, source: TextIO):
    """
    Inspect every hex color in SOURCE (one per line, '-' for stdin).

    Blank lines and lines starting with ';' are skipped. Bad lines are
    reported at the end and the remaining lines are still converted.

    \b
    Text output columns: hex, RGB, HSV, websafe hex.
    JSON output: one object per line.
    """
    out = state.output
    collector = collect_errors("convert colors")

    for line_number, line in enumerate(source, start=1):
        text = line.strip()
        if not text or text.startswith(";"):
            continue

        with collector.try_operation(f"line {line_number} ({text})"):
            info = ColorInfo.from_hex(text)
            record = {"input": text, **out.info_record(info)}
            out.emit(
                record,
                "\t".join(
                    [
                        out.hex(info.hex),
                        out.rgb(info.rgb.to_tuple()),
                        out.hsv(info.hsv.to_tuple()),
                        out.hex(info.websafe_hex),
                    ]
                ),
            )

    logger.info(f"Batch finished: {collector.success_count} converted, {collector.error_count} failed")

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        sys.exit(1)
