"""Logging stories: the ``[lib_log_rich]`` section and the logdemo command."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import pytest
import rtoml
from click.testing import CliRunner, Result
from lib_layered_config import Config

from utilkit.adapters import cli as cli_mod
from utilkit.adapters.config.loader import get_default_config_path
from utilkit.adapters.logging.setup import _build_runtime_config


@pytest.mark.os_agnostic
def test_shipped_logging_section_builds_runtime_config() -> None:
    """defaultconfig.toml yields a prod runtime named after the package at INFO."""
    defaults = Config(rtoml.load(get_default_config_path()), {})

    runtime_config = _build_runtime_config(defaults)

    assert runtime_config.service == "utilkit"
    assert runtime_config.environment == "prod"
    assert runtime_config.console_level == "INFO"


@pytest.mark.os_agnostic
def test_logging_section_values_reach_runtime_config(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    """Explicit service, environment and pass-through keys are honoured."""
    config = config_factory(
        {"lib_log_rich": {"service": "utilkit-worker", "environment": "dev", "console_level": "DEBUG"}}
    )

    runtime_config = _build_runtime_config(config)

    assert runtime_config.service == "utilkit-worker"
    assert runtime_config.environment == "dev"
    assert runtime_config.console_level == "DEBUG"


@pytest.mark.os_agnostic
def test_missing_logging_section_falls_back_to_package_defaults(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    """Without a [lib_log_rich] section the runtime is still fully named."""
    runtime_config = _build_runtime_config(config_factory({"utilkit": {"square_delay_ms": 0}}))

    assert runtime_config.service == "utilkit"
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_logdemo_emits_utilkit_events(
    cli_runner: CliRunner,
    instant_factory: Callable[[], Any],
    caplog: pytest.LogCaptureFixture,
) -> None:
    """logdemo logs domain DEBUG events, an INFO summary and a WARNING rejection."""
    caplog.set_level(logging.DEBUG, logger="utilkit")

    result: Result = cli_runner.invoke(cli_mod.cli, ["logdemo"], obj=instant_factory)

    assert result.exit_code == 0
    assert "Log demo completed" in result.stdout
    utilkit_records = [record for record in caplog.records if record.name.startswith("utilkit.")]
    messages = {(record.levelno, record.getMessage()) for record in utilkit_records}
    assert (logging.INFO, "Squared [2, 3] -> [4, 9]") in messages
    assert (logging.WARNING, "Rejected -1: Negative number not allowed") in messages
    assert any(
        record.levelno == logging.DEBUG and record.name == "utilkit.domain.squaring" for record in utilkit_records
    )
