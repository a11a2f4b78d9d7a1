"""Domain error types: instantiation and message preservation."""

from __future__ import annotations

import pytest

from utilkit.domain.errors import ConfigurationError, InvalidArgumentError


@pytest.mark.os_agnostic
def test_invalid_argument_error_preserves_message() -> None:
    """Instantiation stores the message for display."""
    exc = InvalidArgumentError("Negative number not allowed")
    assert str(exc) == "Negative number not allowed"


@pytest.mark.os_agnostic
def test_invalid_argument_error_is_value_error() -> None:
    """InvalidArgumentError is caught by ``except ValueError`` handlers."""
    with pytest.raises(ValueError, match="Negative"):
        raise InvalidArgumentError("Negative number not allowed")


@pytest.mark.os_agnostic
def test_configuration_error_preserves_message() -> None:
    """Instantiation stores the validation detail."""
    exc = ConfigurationError("square_delay_ms must be >= 0")
    assert str(exc) == "square_delay_ms must be >= 0"


@pytest.mark.os_agnostic
def test_configuration_error_is_not_value_error() -> None:
    """Configuration problems are kept apart from input problems."""
    assert not issubclass(ConfigurationError, ValueError)
