"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` so ``nulljoin info`` and the
``--version`` flag report the installed release without importing
``importlib.metadata`` at startup.

Contents:
    * Module-level metadata constants.
    * :func:`print_info` - Render the metadata block for ``nulljoin info``.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "nulljoin"
#: Human-readable summary shown in CLI help output.
title = "Print a greeting and join a list of strings, skipping absent entries"
#: Current release version pulled from ``pyproject.toml``.
version = "1.0.0"
#: Repository homepage presented to users.
homepage = "https://github.com/nulljoin/nulljoin"
#: Author attribution surfaced in CLI output.
author = "nulljoin contributors"
#: Contact email surfaced in CLI output.
author_email = "nulljoin@users.noreply.github.com"
#: Console-script name published by the package.
shell_command = "nulljoin"

#: Vendor, application and slug identifiers for lib_layered_config paths.
LAYEREDCONF_VENDOR: str = "nulljoin"
LAYEREDCONF_APP: str = "nulljoin"
LAYEREDCONF_SLUG: str = "nulljoin"


def print_info() -> None:
    """Print the summarised metadata block used by ``nulljoin info``.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for nulljoin:
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
