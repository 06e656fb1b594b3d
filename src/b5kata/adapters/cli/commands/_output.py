"""Shared helpers for the data commands.

Internal module (underscore prefix) covering output format selection, JSON
rendering, and record loading with CLI error reporting.

Contents:
    * :data:`format_option` - ``--format human|json`` decorator.
    * :func:`resolve_output_format` - CLI flag, else ``b5kata.output_format``.
    * :func:`echo_json` - Print a payload as indented JSON.
    * :func:`load_or_exit` - Run a record loader, mapping failures to exit codes.
    * :func:`has_wide_integer` / :func:`parse_json_number` - exact JSON number handling.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import orjson
import rich_click as click

from b5kata.domain.enums import OutputFormat
from b5kata.domain.errors import ConfigurationError, RecordsError

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

R = TypeVar("R")

format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help="Output format. Defaults to b5kata.output_format from configuration.",
)


def resolve_output_format(cli_ctx: CLIContext, requested: str | None) -> OutputFormat:
    """Return the explicit ``--format`` value or the configured default.

    Raises:
        SystemExit: With CONFIG_ERROR (78) if the ``[b5kata]`` section is invalid.
    """
    if requested:
        return OutputFormat(requested.lower())
    try:
        settings = cli_ctx.services.load_kata_config_from_dict(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        logger.error("Invalid configuration", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    return settings.output_format


def echo_json(payload: object) -> None:
    """Print ``payload`` as indented JSON; dataclasses serialise field by field."""
    click.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())


def load_or_exit(loader: Callable[[Path], list[R]], path: Path) -> list[R]:
    """Load records from ``path`` or exit with a meaningful code.

    Raises:
        SystemExit: FILE_NOT_FOUND (2) for a missing file, INVALID_ARGUMENT
            (22) for malformed content.
    """
    try:
        return loader(path)
    except FileNotFoundError as exc:
        click.echo(f"Error: file not found: {path}", err=True)
        raise SystemExit(ExitCode.FILE_NOT_FOUND) from exc
    except RecordsError as exc:
        logger.warning("Rejected record file", extra={"path": str(path), "error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


#: orjson decodes integers in this range exactly and widens the rest to float.
_EXACT_INT_MIN = -(2**63)
_EXACT_INT_MAX = 2**64 - 1
_JSON_INTEGER = re.compile(r"-?(?:0|[1-9][0-9]*)")
_JSON_STRING_OR_NUMBER = re.compile(r'"(?:[^"\\]|\\.)*"|-?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?')


def has_wide_integer(raw: str) -> bool:
    """Return True when valid JSON ``raw`` holds an integer orjson cannot keep exact.

    Example:
        >>> has_wide_integer("[1, 18446744073709551616]"), has_wide_integer('["18446744073709551616"]')
        (True, False)
    """
    for match in _JSON_STRING_OR_NUMBER.finditer(raw):
        token = match.group()
        if _JSON_INTEGER.fullmatch(token) and not _EXACT_INT_MIN <= int(token) <= _EXACT_INT_MAX:
            return True
    return False


def parse_json_number(raw: str) -> int | float | None:
    """Return ``raw`` as a JSON number, or None when it is any other JSON value or not JSON.

    Integer literals are parsed exactly whatever their size.

    Example:
        >>> parse_json_number("42"), parse_json_number("2.5"), parse_json_number("true"), parse_json_number("nan")
        (42, 2.5, None, None)
    """
    if _JSON_INTEGER.fullmatch(raw.strip()):
        return int(raw)
    try:
        decoded = orjson.loads(raw)
    except orjson.JSONDecodeError:
        return None
    if isinstance(decoded, (int, float)) and not isinstance(decoded, bool):
        return decoded
    return None


__all__ = [
    "echo_json",
    "format_option",
    "has_wide_integer",
    "load_or_exit",
    "parse_json_number",
    "resolve_output_format",
]
