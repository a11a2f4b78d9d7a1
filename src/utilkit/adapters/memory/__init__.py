"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports that run without
configuration files or a logging runtime.

Contents:
    * :mod:`.config` - In-memory configuration and settings adapters
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    load_settings_in_memory,
)
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from utilkit.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadSettings,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_settings: LoadSettings = load_settings_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_settings_in_memory",
]
