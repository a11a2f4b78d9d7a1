"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without touching the
filesystem.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..config.settings import UtilkitSettings


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config whose ``[utilkit]`` section disables the square delay."""
    return Config({"utilkit": {"square_delay_ms": 0}}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


def load_settings_in_memory(config: Config) -> UtilkitSettings:
    """Return zero-delay settings regardless of *config*."""
    return UtilkitSettings(square_delay_ms=0)


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "load_settings_in_memory",
]
