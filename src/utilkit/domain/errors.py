"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """An operation received input outside its accepted domain.

    Raised by :func:`~utilkit.domain.squaring.square_async` for negative
    numbers, by :func:`~utilkit.domain.behaviors.process_value` for values
    that are neither text nor numbers, and by :meth:`Day.parse` for unknown
    day names. Inherits from ValueError so CLI boundaries can treat every
    input problem the same way.

    Example:
        >>> from utilkit.domain.errors import InvalidArgumentError
        >>> err = InvalidArgumentError("Negative number not allowed")
        >>> str(err)
        'Negative number not allowed'
        >>> isinstance(err, ValueError)
        True
    """


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[utilkit]`` configuration section fails validation.
    Caught at CLI boundaries and mapped to ``ExitCode.CONFIG_ERROR``.

    Example:
        >>> from utilkit.domain.errors import ConfigurationError
        >>> err = ConfigurationError("square_delay_ms must be >= 0")
        >>> str(err)
        'square_delay_ms must be >= 0'
    """


__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
]
