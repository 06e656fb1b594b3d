"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Delayed square command from :mod:`.square_cmd`
    * Exercise commands from :mod:`.exercises`
    * Config commands from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config, cli_config_deploy, cli_config_generate_examples
from .exercises import (
    cli_concat,
    cli_day_type,
    cli_filter_ratings,
    cli_format,
    cli_most_expensive,
    cli_process_value,
    cli_vehicle,
)
from .info import cli_info
from .square_cmd import cli_square

__all__ = [
    "cli_concat",
    "cli_config",
    "cli_config_deploy",
    "cli_config_generate_examples",
    "cli_day_type",
    "cli_filter_ratings",
    "cli_format",
    "cli_info",
    "cli_most_expensive",
    "cli_process_value",
    "cli_square",
    "cli_vehicle",
]
