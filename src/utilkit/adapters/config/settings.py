"""Typed view of the ``[utilkit]`` configuration section.

Contents:
    * :class:`UtilkitSettings` - pydantic model validated at the boundary.
    * :func:`load_settings` - parse a Config into settings.
"""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from utilkit.domain.errors import ConfigurationError
from utilkit.domain.squaring import SQUARE_DELAY_MS


class UtilkitSettings(BaseModel):
    """Pydantic model for the [utilkit] config section.

    Example:
        >>> UtilkitSettings().square_delay_ms
        1000
        >>> UtilkitSettings(square_delay_ms=250).square_delay_ms
        250.0
    """

    square_delay_ms: float = Field(default=SQUARE_DELAY_MS, ge=0, allow_inf_nan=False)

    model_config = ConfigDict(extra="forbid", frozen=True)


def load_settings(config: Config) -> UtilkitSettings:
    """Validate the ``[utilkit]`` section of *config*.

    Missing sections fall back to the model defaults.

    Raises:
        ConfigurationError: If the section holds unknown keys or invalid values.

    Example:
        >>> load_settings(Config({"utilkit": {"square_delay_ms": 10}}, {})).square_delay_ms
        10.0
    """
    raw: object = config.get("utilkit", default={})
    try:
        return UtilkitSettings.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [utilkit] configuration: {exc}") from exc


__all__ = [
    "UtilkitSettings",
    "load_settings",
]
