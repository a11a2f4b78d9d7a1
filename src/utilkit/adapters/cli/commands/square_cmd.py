"""Delayed square CLI command.

Contents:
    * :func:`cli_square` - Square numbers concurrently after the configured delay.
"""

from __future__ import annotations

import asyncio
import logging
import math

import lib_log_rich.runtime
import rich_click as click

from utilkit.domain.errors import ConfigurationError
from utilkit.domain.squaring import square_many

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import parse_number, reject_invalid_input

logger = logging.getLogger(__name__)


def _require_finite(_ctx: click.Context, _param: click.Parameter, value: float | None) -> float | None:
    if value is not None and not math.isfinite(value):
        raise click.BadParameter(f"{value} is not a finite number of milliseconds.")
    return value


@click.command("square", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("numbers", nargs=-1, required=True, metavar="N...")
@click.option(
    "--delay-ms",
    type=click.FloatRange(min=0),
    default=None,
    callback=_require_finite,
    help="Milliseconds to wait before each result resolves (default: utilkit.square_delay_ms)",
)
@click.pass_context
def cli_square(ctx: click.Context, numbers: tuple[str, ...], delay_ms: float | None) -> None:
    r"""Print the square of each N after a fixed delay.

    All inputs are squared concurrently, so the command takes about one
    delay regardless of how many numbers are given. Negative numbers are
    rejected before any waiting; pass them after ``--``:

    \b
        utilkit square -- -2
    """
    cli_ctx = get_cli_context(ctx)
    if delay_ms is None:
        try:
            delay_ms = cli_ctx.services.load_settings(cli_ctx.config).square_delay_ms
        except ConfigurationError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    with lib_log_rich.runtime.bind(job_id="cli-square", extra={"command": "square", "delay_ms": delay_ms}):
        with reject_invalid_input():
            values = [parse_number(raw) for raw in numbers]
            logger.info("Squaring numbers", extra={"count": len(values)})
            results = asyncio.run(square_many(values, delay_ms=delay_ms))
        for result in results:
            click.echo(result)


__all__ = ["cli_square"]
