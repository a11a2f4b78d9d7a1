"""Configuration adapter - loading, overrides, display, and settings.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.settings` - Typed ``[utilkit]`` section
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import UtilkitSettings, load_settings

__all__ = [
    "UtilkitSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_settings",
]
