"""Static package metadata surfaced to CLI commands and documentation.

Keep these values in sync with ``pyproject.toml``; the metadata tests compare
both sources so drift is caught before release.

Contents:
    * Module-level constants describing the distribution.
    * :func:`print_info` - render the constants for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name declared in pyproject.toml.
name = "utilkit"
#: Human-readable summary shown in CLI help output.
title = "Small utility operations with a delayed asynchronous square"
#: Current release version pulled from pyproject.toml by the release tooling.
version = "0.1.0"
#: Repository homepage presented to users.
homepage = "https://github.com/utilkit/utilkit"
#: Author attribution surfaced in CLI output.
author = "utilkit maintainers"
#: Contact email surfaced in CLI output.
author_email = "maintainers@utilkit.dev"
#: Console-script name published by the package.
shell_command = "utilkit"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "utilkit"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "utilkit"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "utilkit"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for utilkit:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
