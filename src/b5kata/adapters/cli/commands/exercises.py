"""CLI commands for the synchronous exercises.

Each command is a thin shell around one domain function: parse arguments,
call the function, print the result in the selected format.

Contents:
    * :func:`cli_format` - Upper- or lower-case text.
    * :func:`cli_filter_ratings` - Keep well-rated items from a JSON file.
    * :func:`cli_concat` - Concatenate JSON arrays.
    * :func:`cli_vehicle` - Describe a vehicle or car.
    * :func:`cli_process_value` - Length of a string or double of a number.
    * :func:`cli_most_expensive` - Highest-priced product from a JSON file.
    * :func:`cli_day_type` - Weekday or weekend.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import orjson
import rich_click as click

from b5kata.domain.behaviors import (
    concatenate_arrays,
    filter_by_rating,
    format_string,
    get_day_type,
    get_most_expensive_product,
    process_value,
)
from b5kata.domain.enums import Day, OutputFormat
from b5kata.domain.models import Car, Vehicle

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._output import (
    echo_json,
    format_option,
    has_wide_integer,
    load_or_exit,
    parse_json_number,
    resolve_output_format,
)

logger = logging.getLogger(__name__)

_RECORD_FILE = click.Path(dir_okay=False, path_type=Path)


@click.command("format", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.option("--upper/--lower", "to_upper", default=True, help="Upper-case (default) or lower-case TEXT")
def cli_format(text: str, to_upper: bool) -> None:
    """Print TEXT upper-cased, or lower-cased with --lower."""
    with lib_log_rich.runtime.bind(job_id="cli-format", extra={"command": "format", "to_upper": to_upper}):
        logger.info("Formatting text", extra={"length": len(text)})
        click.echo(format_string(text, to_upper=to_upper))


@click.command("filter-ratings", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("file", type=_RECORD_FILE)
@format_option
@click.pass_context
def cli_filter_ratings(ctx: click.Context, file: Path, output_format: str | None) -> None:
    """Print the items in FILE rated 4 or higher.

    FILE holds a JSON array of objects with "title" and "rating".
    """
    cli_ctx = get_cli_context(ctx)
    fmt = resolve_output_format(cli_ctx, output_format)
    with lib_log_rich.runtime.bind(job_id="cli-filter-ratings", extra={"command": "filter-ratings", "file": str(file)}):
        items = load_or_exit(cli_ctx.services.load_rated_items, file)
        kept = filter_by_rating(items)
        logger.info("Filtered rated items", extra={"total": len(items), "kept": len(kept)})
        if fmt is OutputFormat.JSON:
            echo_json(kept)
            return
        for item in kept:
            click.echo(f"{item.title} ({item.rating:g})")


def _parse_array(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> list[list[object]]:
    """Decode each argument as a JSON array."""
    arrays: list[list[object]] = []
    for raw in values:
        try:
            decoded = orjson.loads(raw)
        except orjson.JSONDecodeError as exc:
            raise click.BadParameter(f"{raw!r} is not valid JSON", ctx=ctx, param=param) from exc
        if not isinstance(decoded, list):
            raise click.BadParameter(f"{raw!r} is not a JSON array", ctx=ctx, param=param)
        if has_wide_integer(raw):
            raise click.BadParameter(f"{raw!r} holds an integer wider than 64 bits", ctx=ctx, param=param)
        arrays.append(decoded)
    return arrays


@click.command("concat", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("arrays", nargs=-1, callback=_parse_array, metavar="JSON_ARRAY...")
@format_option
@click.pass_context
def cli_concat(ctx: click.Context, arrays: list[list[object]], output_format: str | None) -> None:
    """Concatenate JSON arrays, e.g. concat '[1, 2]' '["a"]'."""
    fmt = resolve_output_format(get_cli_context(ctx), output_format)
    with lib_log_rich.runtime.bind(job_id="cli-concat", extra={"command": "concat", "arrays": len(arrays)}):
        joined = concatenate_arrays(*arrays)
        logger.info("Concatenated arrays", extra={"elements": len(joined)})
        if fmt is OutputFormat.JSON:
            echo_json(joined)
            return
        for element in joined:
            click.echo(element if isinstance(element, str) else orjson.dumps(element).decode())


@click.command("vehicle", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--make", required=True, help="Manufacturer, e.g. Toyota")
@click.option("--year", required=True, type=int, help="Model year")
@click.option("--model", default=None, help="Model name; describes a car when given")
@format_option
@click.pass_context
def cli_vehicle(ctx: click.Context, make: str, year: int, model: str | None, output_format: str | None) -> None:
    """Describe a vehicle, or a car when --model is given."""
    fmt = resolve_output_format(get_cli_context(ctx), output_format)
    subject: Vehicle | Car = Car.build(make, year, model) if model is not None else Vehicle(make, year)
    with lib_log_rich.runtime.bind(job_id="cli-vehicle", extra={"command": "vehicle"}):
        logger.info("Describing vehicle", extra={"kind": type(subject).__name__})
        if fmt is OutputFormat.JSON:
            echo_json(subject)
            return
        click.echo(subject.get_info())
        if isinstance(subject, Car):
            click.echo(subject.get_model())


@click.command("process-value", context_settings={**CLICK_CONTEXT_SETTINGS, "ignore_unknown_options": True})
@click.argument("value")
@click.option("--as-string", is_flag=True, default=False, help="Treat VALUE as text even if it looks numeric")
def cli_process_value(value: str, as_string: bool) -> None:
    """Print the length of VALUE, or twice VALUE when it is a JSON number."""
    number = None if as_string else parse_json_number(value)
    parsed: str | float = value if number is None else number
    with lib_log_rich.runtime.bind(job_id="cli-process-value", extra={"command": "process-value"}):
        logger.info("Processing value", extra={"kind": type(parsed).__name__})
        click.echo(process_value(parsed))


@click.command("most-expensive", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("file", type=_RECORD_FILE)
@format_option
@click.pass_context
def cli_most_expensive(ctx: click.Context, file: Path, output_format: str | None) -> None:
    """Print the highest-priced product in FILE.

    FILE holds a JSON array of objects with "name" and "price". Ties go to
    the product listed last.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = resolve_output_format(cli_ctx, output_format)
    with lib_log_rich.runtime.bind(job_id="cli-most-expensive", extra={"command": "most-expensive", "file": str(file)}):
        products = load_or_exit(cli_ctx.services.load_products, file)
        top = get_most_expensive_product(products)
        logger.info("Selected most expensive product", extra={"total": len(products), "found": top is not None})
        if fmt is OutputFormat.JSON:
            echo_json(top)
        elif top is None:
            click.echo("No products")
        else:
            click.echo(f"{top.name}: {top.price:g}")


@click.command("day-type", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("day", type=click.Choice([d.name.lower() for d in Day], case_sensitive=False))
def cli_day_type(day: str) -> None:
    """Print whether DAY is a Weekday or a Weekend day."""
    with lib_log_rich.runtime.bind(job_id="cli-day-type", extra={"command": "day-type"}):
        day_type = get_day_type(Day[day.upper()])
        logger.info("Classified day", extra={"day": day.lower(), "day_type": day_type.value})
        click.echo(day_type.value)


__all__ = [
    "cli_concat",
    "cli_day_type",
    "cli_filter_ratings",
    "cli_format",
    "cli_most_expensive",
    "cli_process_value",
    "cli_vehicle",
]
