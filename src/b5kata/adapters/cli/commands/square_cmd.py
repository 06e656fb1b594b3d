"""Delayed square CLI command.

Contents:
    * :class:`NumberParamType` - Click type accepting ints and floats.
    * :func:`cli_square` - Square numbers after the fixed delay.
"""

from __future__ import annotations

import asyncio
import logging

import lib_log_rich.runtime
import rich_click as click

from b5kata.application.scheduler import SQUARE_DELAY_SECONDS, compute_delayed_squares
from b5kata.domain.enums import OutputFormat
from b5kata.domain.errors import NegativeInputError
from b5kata.domain.results import Err, Ok

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._output import echo_json, format_option, resolve_output_format

logger = logging.getLogger(__name__)

#: Negative numbers look like options to Click; let them through as arguments.
_SQUARE_CONTEXT_SETTINGS = {**CLICK_CONTEXT_SETTINGS, "ignore_unknown_options": True}


class NumberParamType(click.ParamType):
    """Parse an int when the text is integral, otherwise a float.

    Example:
        >>> NUMBER.convert("5", None, None), NUMBER.convert("2.5", None, None)
        (5, 2.5)
    """

    name = "number"

    def convert(self, value: object, param: click.Parameter | None, ctx: click.Context | None) -> int | float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        text = str(value)
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            self.fail(f"{text!r} is not a number", param, ctx)


NUMBER = NumberParamType()


def _describe(value: float, outcome: Ok[float] | Err[NegativeInputError]) -> dict[str, object]:
    if isinstance(outcome, Ok):
        return {"input": value, "square": outcome.value}
    return {"input": value, "error": outcome.reason}


@click.command("square", context_settings=_SQUARE_CONTEXT_SETTINGS)
@click.argument("numbers", nargs=-1, required=True, type=NUMBER)
@format_option
@click.pass_context
def cli_square(ctx: click.Context, numbers: tuple[float, ...], output_format: str | None) -> None:
    """Square each NUMBER after a fixed one-second delay.

    All numbers are scheduled together, so the command takes about one second
    however many are given. Negative numbers fail at once; results print as
    they arrive. Exits with 22 when any number was negative.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = resolve_output_format(cli_ctx, output_format)

    def _report(value: float, outcome: Ok[float] | Err[NegativeInputError]) -> None:
        if isinstance(outcome, Ok):
            click.echo(f"{value} -> {outcome.value}")
        else:
            click.echo(f"{value} -> {outcome.reason}", err=True)

    extra = {"command": "square", "count": len(numbers), "delay": SQUARE_DELAY_SECONDS}
    with lib_log_rich.runtime.bind(job_id="cli-square", extra=extra):
        logger.info("Scheduling delayed squares", extra={"count": len(numbers)})
        on_outcome = _report if fmt is OutputFormat.HUMAN else None
        outcomes = asyncio.run(compute_delayed_squares(numbers, on_outcome=on_outcome))

        if fmt is OutputFormat.JSON:
            echo_json([_describe(value, outcome) for value, outcome in zip(numbers, outcomes, strict=True)])

        failures = sum(1 for outcome in outcomes if not outcome.is_ok())
        if failures:
            logger.warning("Rejected negative inputs", extra={"failures": failures})
            raise SystemExit(ExitCode.INVALID_ARGUMENT)


__all__ = ["NUMBER", "NumberParamType", "cli_square"]
