"""Integration tests for the config display wrapper.

The wrapper flushes pending log records and delegates rendering to
lib_layered_config, whose own suite covers the renderer in depth.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from utilkit.adapters.config.display import display_config
from utilkit.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", [OutputFormat.HUMAN, OutputFormat.JSON])
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    """Requesting a section that doesn't exist raises ValueError in both formats."""
    config = config_factory({"utilkit": {"square_delay_ms": 1000}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_renders_sections(capsys: pytest.CaptureFixture[str]) -> None:
    """The human view renders TOML-style section headers."""
    display_config(Config({"utilkit": {"square_delay_ms": 1000}}, {}), output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[utilkit]" in output
    assert "square_delay_ms" in output


@pytest.mark.os_agnostic
def test_display_json_renders_keys(capsys: pytest.CaptureFixture[str]) -> None:
    """The JSON view quotes section and key names."""
    display_config(Config({"utilkit": {"square_delay_ms": 1000}}, {}), output_format=OutputFormat.JSON)

    output = capsys.readouterr().out
    assert '"utilkit"' in output
    assert '"square_delay_ms"' in output
