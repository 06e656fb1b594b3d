"""Static package metadata surfaced to CLI commands and documentation.

Keep these values in sync with ``pyproject.toml``; ``tests/test_metadata.py``
guards the invariant.

Contents:
    * Distribution metadata (``name``, ``title``, ``version`` ...).
    * Layered configuration identifiers (``LAYEREDCONF_*``).
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "b5kata"
title: Final[str] = "Small typed exercises with a delayed-square core"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/b5kata/b5kata"
author: Final[str] = "b5kata maintainers"
author_email: Final[str] = "maintainers@b5kata.dev"
shell_command: Final[str] = "b5kata"

#: Vendor segment used by lib_layered_config for macOS/Windows paths.
LAYEREDCONF_VENDOR: Final[str] = "b5kata"
#: Application segment used by lib_layered_config for macOS/Windows paths.
LAYEREDCONF_APP: Final[str] = "b5kata"
#: Slug used by lib_layered_config for XDG paths and environment prefixes.
LAYEREDCONF_SLUG: Final[str] = "b5kata"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for b5kata:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
