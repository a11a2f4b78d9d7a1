"""Exit codes for the CLI's handled error paths.

Success, Click usage errors (2), and unexpected exceptions are translated by
Click and ``lib_cli_exit_tools`` on their own.

Contents:
    * :class:`ExitCode` - IntEnum of the codes commands raise explicitly.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes raised via ``SystemExit``.

    * 22: EINVAL, rejected input
    * 78: EX_CONFIG (sysexits.h), invalid ``[utilkit]`` section

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
