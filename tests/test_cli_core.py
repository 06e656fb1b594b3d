"""CLI core stories: traceback handling, main entry, help, info, context helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
import rich_click as click
from click.testing import CliRunner, Result
from lib_layered_config import Config

from b5kata import __init__conf__
from b5kata.adapters import cli as cli_mod
from b5kata.composition import build_production, build_testing


def _explode() -> None:
    raise RuntimeError("I should fail")


# ======================== Traceback state ========================


@pytest.mark.os_agnostic
def test_snapshot_traceback_state_returns_disabled_by_default(managed_traceback_state: None) -> None:
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_apply_then_restore_traceback_state_round_trips(managed_traceback_state: None) -> None:
    previous = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True

    cli_mod.restore_traceback_state(previous)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_during_command_and_restored_after(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    notes: list[tuple[bool, bool]] = []

    def record() -> None:
        notes.append((lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color))

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert exit_code == 0
    assert notes == [(True, True)]
    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.os_agnostic
def test_restore_traceback_false_keeps_flags_enabled(managed_traceback_state: None) -> None:
    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_traceback_flag_prints_full_traceback_on_failure(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    monkeypatch.setattr(__init__conf__, "print_info", _explode)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: I should fail" in plain_err


@pytest.mark.os_agnostic
def test_failure_without_traceback_flag_prints_summary_only(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    monkeypatch.setattr(__init__conf__, "print_info", _explode)

    exit_code = cli_mod.main(["info"], services_factory=build_production)

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exit_code != 0
    assert "I should fail" in plain_err
    assert "Traceback (most recent call last)" not in plain_err


# ======================== main() ========================


@pytest.mark.os_agnostic
def test_main_raises_when_services_factory_is_none() -> None:
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["--help"], services_factory=None)


@pytest.mark.os_agnostic
def test_main_runs_info_and_prints_metadata(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert cli_mod.main(["info"], services_factory=build_production) == 0
    assert f"Info for {__init__conf__.name}:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_without_arguments_shows_help(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert cli_mod.main([], services_factory=build_production) == 0
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_main_returns_usage_error_code_for_malformed_set(managed_traceback_state: None) -> None:
    exit_code = cli_mod.main(["--set", "invalid_no_dot=value", "info"], services_factory=build_production)

    assert exit_code == 2


@pytest.mark.os_agnostic
def test_main_returns_code_from_command_system_exit(managed_traceback_state: None) -> None:
    exit_code = cli_mod.main(["square", "--format", "json", "-1"], services_factory=build_production)

    assert exit_code == cli_mod.ExitCode.INVALID_ARGUMENT


@pytest.mark.os_agnostic
def test_main_version_exits_cleanly(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert cli_mod.main(["--version"], services_factory=build_production) == 0
    assert __init__conf__.version in capsys.readouterr().out


# ======================== Root group ========================


@pytest.mark.os_agnostic
def test_cli_without_arguments_prints_help(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result = cli_runner.invoke(cli_mod.cli, [], obj=production_factory)

    assert result.exit_code == 0
    assert "Usage:" in result.output


@pytest.mark.os_agnostic
def test_help_lists_every_command(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--help"], obj=production_factory)

    for name in ("info", "square", "format", "filter-ratings", "concat", "vehicle", "process-value", "most-expensive", "day-type", "config"):
        assert name in result.output


@pytest.mark.os_agnostic
def test_info_command_displays_project_metadata(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.stdout
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_unknown_command_shows_no_such_command_error(
    cli_runner: CliRunner, production_factory: Callable[[], Any]
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=production_factory)

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_cli_root_rejects_non_callable_obj(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj="not_callable")

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_invalid_profile_name_is_a_bad_parameter(cli_runner: CliRunner, production_factory: Callable[[], Any]) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "../escape", "info"], obj=production_factory)

    assert result.exit_code == 2
    assert "--profile" in result.output


@pytest.mark.os_agnostic
def test_set_override_reaches_the_command(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"b5kata": {"output_format": "human"}})

    result = cli_runner.invoke(cli_mod.cli, ["--set", "b5kata.output_format=json", "concat", "[1]"], obj=factory)

    assert result.exit_code == 0
    assert result.stdout.strip().startswith("[")


# ======================== Context helpers ========================


@pytest.mark.os_agnostic
def test_get_cli_context_raises_when_not_initialized() -> None:
    ctx = click.Context(click.Command("test"))
    ctx.obj = "not a CLIContext"

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        cli_mod.get_cli_context(ctx)


@pytest.mark.os_agnostic
def test_store_and_get_cli_context_round_trip() -> None:
    ctx = click.Context(click.Command("test"))

    cli_mod.store_cli_context(
        ctx,
        traceback=True,
        config=Config({}, {}),
        services=build_testing(),
        profile="staging",
        set_overrides=("b5kata.output_format=json",),
    )
    result = cli_mod.get_cli_context(ctx)

    assert isinstance(result, cli_mod.CLIContext)
    assert result.traceback is True
    assert result.profile == "staging"
    assert result.set_overrides == ("b5kata.output_format=json",)
