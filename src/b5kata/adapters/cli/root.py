"""Root CLI command group and global option handling.

Defines the top-level Click command group that serves as the entry point for
all subcommands. Handles global flags like --traceback, --profile, and --set.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from b5kata import __init__conf__
from b5kata.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from b5kata.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, turning malformed strings into a UsageError."""
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration once, start logging, and hand state to the subcommand.

    ``ctx.obj`` arrives as the services factory (production or test) and
    leaves as a :class:`~b5kata.adapters.cli.context.CLIContext`.

    Example:
        >>> from click.testing import CliRunner
        >>> from b5kata.composition import build_production
        >>> result = CliRunner().invoke(cli, ["format", "hello"], obj=build_production)
        >>> result.stdout
        'HELLO\\n'
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred import: command modules import from this package's ancestors, so
# registering them at import time of ``cli`` would be circular.
def _register_commands() -> None:
    from .commands import (
        cli_concat,
        cli_config,
        cli_config_deploy,
        cli_config_generate_examples,
        cli_day_type,
        cli_filter_ratings,
        cli_format,
        cli_info,
        cli_most_expensive,
        cli_process_value,
        cli_square,
        cli_vehicle,
    )

    for cmd in (
        cli_info,
        cli_square,
        cli_format,
        cli_filter_ratings,
        cli_concat,
        cli_vehicle,
        cli_process_value,
        cli_most_expensive,
        cli_day_type,
        cli_config,
        cli_config_deploy,
        cli_config_generate_examples,
    ):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
