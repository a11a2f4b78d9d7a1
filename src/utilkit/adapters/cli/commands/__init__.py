"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Logging demo from :mod:`.logging`
    * Transformation commands from :mod:`.transforms`
    * Delayed square from :mod:`.square_cmd`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .logging import cli_logdemo
from .square_cmd import cli_square
from .transforms import (
    cli_concat,
    cli_day_type,
    cli_describe_vehicle,
    cli_filter_ratings,
    cli_format,
    cli_measure,
    cli_most_expensive,
)

__all__ = [
    "cli_concat",
    "cli_config",
    "cli_day_type",
    "cli_describe_vehicle",
    "cli_filter_ratings",
    "cli_format",
    "cli_info",
    "cli_logdemo",
    "cli_measure",
    "cli_most_expensive",
    "cli_square",
]
