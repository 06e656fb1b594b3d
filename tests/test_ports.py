"""Port contract tests: every in-memory adapter honours its Protocol.

The fixtures type each implementation as its port, so pyright checks the
signatures while pytest checks the behaviour.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from lib_layered_config import Config

from b5kata.adapters.config.kata import KataConfig
from b5kata.adapters.memory import (
    RecordStore,
    deploy_configuration_in_memory,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
    load_kata_config_from_dict_in_memory,
)
from b5kata.application.ports import (
    DeployConfiguration,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadKataConfigFromDict,
    LoadProducts,
    LoadRatedItems,
)
from b5kata.domain.enums import DeployTarget, OutputFormat
from b5kata.domain.models import Product, RatedItem

STORED_PATH = Path("records.json")


@pytest.fixture
def get_config_impl() -> GetConfig:
    return get_config_in_memory


@pytest.fixture
def get_default_config_path_impl() -> GetDefaultConfigPath:
    return get_default_config_path_in_memory


@pytest.fixture
def deploy_configuration_impl() -> DeployConfiguration:
    return deploy_configuration_in_memory


@pytest.fixture
def display_config_impl() -> DisplayConfig:
    return display_config_in_memory


@pytest.fixture
def load_kata_config_impl() -> LoadKataConfigFromDict:
    return load_kata_config_from_dict_in_memory


@pytest.fixture
def record_store() -> RecordStore:
    return RecordStore(
        rated_items={STORED_PATH: [RatedItem("Dune", 4.5)]},
        products={STORED_PATH: [Product("Pen", 2.0)]},
    )


@pytest.fixture
def load_rated_items_impl(record_store: RecordStore) -> LoadRatedItems:
    return record_store.load_rated_items


@pytest.fixture
def load_products_impl(record_store: RecordStore) -> LoadProducts:
    return record_store.load_products


@pytest.fixture
def init_logging_impl() -> InitLogging:
    return init_logging_in_memory


@pytest.mark.os_agnostic
def test_get_config_returns_empty_config(get_config_impl: GetConfig) -> None:
    config = get_config_impl(profile="staging")

    assert isinstance(config, Config)
    assert config.as_dict() == {}


@pytest.mark.os_agnostic
def test_get_default_config_path_returns_toml_path(get_default_config_path_impl: GetDefaultConfigPath) -> None:
    path = get_default_config_path_impl()

    assert isinstance(path, Path)
    assert path.name == "defaultconfig.toml"


@pytest.mark.os_agnostic
def test_deploy_configuration_touches_nothing(deploy_configuration_impl: DeployConfiguration) -> None:
    assert deploy_configuration_impl(targets=[DeployTarget.USER], force=True) == []


@pytest.mark.os_agnostic
def test_display_config_writes_nothing(
    display_config_impl: DisplayConfig,
    capsys: pytest.CaptureFixture[str],
) -> None:
    display_config_impl(Config({"b5kata": {"output_format": "json"}}, {}), output_format=OutputFormat.JSON)

    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_load_kata_config_ignores_input(load_kata_config_impl: LoadKataConfigFromDict) -> None:
    assert load_kata_config_impl({"b5kata": {"output_format": "json"}}) == KataConfig()


@pytest.mark.os_agnostic
def test_record_store_serves_stored_rated_items(load_rated_items_impl: LoadRatedItems) -> None:
    assert load_rated_items_impl(STORED_PATH) == [RatedItem("Dune", 4.5)]


@pytest.mark.os_agnostic
def test_record_store_serves_stored_products(load_products_impl: LoadProducts) -> None:
    assert load_products_impl(STORED_PATH) == [Product("Pen", 2.0)]


@pytest.mark.os_agnostic
def test_record_store_returns_a_copy(record_store: RecordStore) -> None:
    loaded = record_store.load_products(STORED_PATH)
    loaded.clear()

    assert record_store.load_products(STORED_PATH) == [Product("Pen", 2.0)]


@pytest.mark.os_agnostic
def test_record_store_raises_for_unknown_path(load_rated_items_impl: LoadRatedItems) -> None:
    with pytest.raises(FileNotFoundError):
        load_rated_items_impl(Path("missing.json"))


@pytest.mark.os_agnostic
def test_init_logging_does_not_raise(init_logging_impl: InitLogging) -> None:
    init_logging_impl(Config({}, {}))


# ======================== Composition Wiring Tests ========================


@pytest.mark.os_agnostic
def test_build_production_returns_fully_populated_app_services() -> None:
    from b5kata.composition import AppServices, build_production

    services = build_production()
    assert isinstance(services, AppServices)
    for field_name in services.__dataclass_fields__:
        assert callable(getattr(services, field_name))


@pytest.mark.os_agnostic
def test_build_testing_returns_fully_populated_app_services() -> None:
    from b5kata.composition import AppServices, build_testing

    services = build_testing()
    assert isinstance(services, AppServices)
    for field_name in services.__dataclass_fields__:
        assert callable(getattr(services, field_name))


@pytest.mark.os_agnostic
def test_build_testing_serves_the_given_store(record_store: RecordStore) -> None:
    from b5kata.composition import build_testing

    services = build_testing(store=record_store)

    assert services.load_products(STORED_PATH) == [Product("Pen", 2.0)]


@pytest.mark.os_agnostic
def test_build_testing_without_store_has_no_records() -> None:
    from b5kata.composition import build_testing

    with pytest.raises(FileNotFoundError):
        build_testing().load_products(STORED_PATH)
