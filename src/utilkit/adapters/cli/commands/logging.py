"""Logging demonstration CLI command.

Contents:
    * :func:`cli_logdemo` - Emit sample utilkit events through the configured runtime.
"""

from __future__ import annotations

import asyncio
import logging

import lib_log_rich.runtime
import rich_click as click

from utilkit.domain.errors import InvalidArgumentError
from utilkit.domain.squaring import square_many

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)

SAMPLE_NUMBERS: tuple[int, ...] = (2, 3)
REJECTED_SAMPLE = -1


@click.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_logdemo() -> None:
    """Emit sample utilkit log events to preview the ``[lib_log_rich]`` setup.

    Squares a few numbers without delay (DEBUG events from the domain),
    reports the batch at INFO, and logs a rejected negative input at WARNING.
    Which of them appear depends on ``lib_log_rich.console_level``.
    """
    with lib_log_rich.runtime.bind(job_id="cli-logdemo", extra={"command": "logdemo"}):
        results = asyncio.run(square_many(SAMPLE_NUMBERS, delay_ms=0))
        logger.info("Squared %s -> %s", list(SAMPLE_NUMBERS), results, extra={"count": len(results)})
        try:
            asyncio.run(square_many([REJECTED_SAMPLE], delay_ms=0))
        except InvalidArgumentError as exc:
            logger.warning("Rejected %s: %s", REJECTED_SAMPLE, exc, extra={"input": REJECTED_SAMPLE})

    lib_log_rich.runtime.flush()
    click.echo("\nLog demo completed")


__all__ = ["cli_logdemo"]
