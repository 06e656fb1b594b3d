"""CLI package providing the command-line interface.

Contents:
    * Click context helpers and traceback state management from :mod:`.context`
    * Root command group from :mod:`.root`
    * Entry point from :mod:`.main`
    * All command functions from :mod:`.commands`
"""

from __future__ import annotations

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
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "ExitCode",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Context helpers
    "CLIContext",
    "get_cli_context",
    "store_cli_context",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
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
