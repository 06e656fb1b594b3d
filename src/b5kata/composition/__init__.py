"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.deploy import deploy_configuration
from ..adapters.config.display import display_config
from ..adapters.config.kata import load_kata_config_from_dict
from ..adapters.config.loader import get_config, get_default_config_path

# Logging services
from ..adapters.logging.setup import init_logging

# Record services
from ..adapters.records.loader import load_products, load_rated_items

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.records import RecordStore
    from ..application.ports import (
        DeployConfiguration,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadKataConfigFromDict,
        LoadProducts,
        LoadRatedItems,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_deploy_configuration: DeployConfiguration = deploy_configuration
    _assert_display_config: DisplayConfig = display_config
    _assert_load_kata_config_from_dict: LoadKataConfigFromDict = load_kata_config_from_dict
    _assert_load_rated_items: LoadRatedItems = load_rated_items
    _assert_load_products: LoadProducts = load_products
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    deploy_configuration: DeployConfiguration
    display_config: DisplayConfig
    load_kata_config_from_dict: LoadKataConfigFromDict
    load_rated_items: LoadRatedItems
    load_products: LoadProducts
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        deploy_configuration=deploy_configuration,
        display_config=display_config,
        load_kata_config_from_dict=load_kata_config_from_dict,
        load_rated_items=load_rated_items,
        load_products=load_products,
        init_logging=init_logging,
    )


def build_testing(*, store: RecordStore | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        store: Records served to the data commands. When None, an empty
            RecordStore is used and every load raises FileNotFoundError.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        RecordStore,
        deploy_configuration_in_memory,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_kata_config_from_dict_in_memory,
    )

    records = store if store is not None else RecordStore()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        deploy_configuration=deploy_configuration_in_memory,
        display_config=display_config_in_memory,
        load_kata_config_from_dict=load_kata_config_from_dict_in_memory,
        load_rated_items=records.load_rated_items,
        load_products=records.load_products,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "deploy_configuration",
    "display_config",
    "load_kata_config_from_dict",
    # Records
    "load_rated_items",
    "load_products",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
