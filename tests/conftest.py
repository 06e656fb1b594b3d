"""Shared pytest fixtures for CLI and module-entry tests.

- All shared fixtures live here
- Tests receive fixtures implicitly via pytest's conftest discovery
- Fixture names read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import orjson
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from b5kata.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for command output; log records go to stderr and
    would otherwise be mixed in.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from b5kata.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before the test; a monkeypatched ``get_config`` has no
    ``cache_clear`` afterwards.
    """
    from b5kata.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def inject_services(clear_config_cache: None) -> Callable[..., Callable[[], AppServices]]:
    """Return a factory that swaps selected production services.

    Example:
        def test_x(cli_runner, inject_services):
            factory = inject_services(load_products=lambda path: [])
            cli_runner.invoke(cli, ["most-expensive", "p.json"], obj=factory)
    """
    from b5kata.composition import build_production

    def _inject(**overrides: Any) -> Callable[[], AppServices]:
        services = replace(build_production(), **overrides)
        return lambda: services

    return _inject


@pytest.fixture
def inject_config(
    inject_services: Callable[..., Callable[[], AppServices]],
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that serves a fixed Config in place of the layered loader."""

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        return inject_services(get_config=_fake_get_config)

    return _inject


@pytest.fixture
def config_cli_context(
    inject_config: Callable[[Config], Callable[[], AppServices]],
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Create a services factory whose configuration is ``config_data``."""

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        return inject_config(Config(config_data, {}))

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    inject_services: Callable[..., Callable[[], AppServices]],
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it is asked for."""

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        return inject_services(get_config=_capturing_get_config)

    return _inject


@pytest.fixture
def inject_deploy_configuration(
    inject_services: Callable[..., Callable[[], AppServices]],
) -> Callable[[Callable[..., list[Path]]], Callable[[], AppServices]]:
    """Return a factory with a custom deploy_configuration function."""

    def _inject(deploy_fn: Callable[..., list[Path]]) -> Callable[[], AppServices]:
        return inject_services(deploy_configuration=deploy_fn)

    return _inject


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    """Write a JSON payload into ``tmp_path`` and return the file path."""

    def _write(name: str, payload: object) -> Path:
        path = tmp_path / name
        path.write_bytes(orjson.dumps(payload))
        return path

    return _write


@pytest.fixture
def records_cli_context(
    clear_config_cache: None,
) -> Callable[..., Callable[[], AppServices]]:
    """Create a services factory that serves records from memory.

    Configuration, deployment and display are the in-memory adapters; logging
    stays real so commands can bind their log context.

    Example:
        def test_x(cli_runner, records_cli_context):
            factory = records_cli_context(products={Path("p.json"): [Product("Pen", 1)]})
            cli_runner.invoke(cli, ["most-expensive", "p.json"], obj=factory)
    """
    from b5kata.adapters.logging.setup import init_logging
    from b5kata.adapters.memory import RecordStore
    from b5kata.composition import build_testing

    def _create(
        *,
        rated_items: dict[Path, list[Any]] | None = None,
        products: dict[Path, list[Any]] | None = None,
    ) -> Callable[[], AppServices]:
        store = RecordStore(rated_items=dict(rated_items or {}), products=dict(products or {}))
        services = replace(build_testing(store=store), init_logging=init_logging)
        return lambda: services

    return _create
