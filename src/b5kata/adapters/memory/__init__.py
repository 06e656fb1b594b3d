"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.records` - In-memory record loaders (RecordStore class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    deploy_configuration_in_memory,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    load_kata_config_from_dict_in_memory,
)
from .logging import init_logging_in_memory
from .records import RecordStore

# Static conformance assertions
if TYPE_CHECKING:
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

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_deploy_configuration: DeployConfiguration = deploy_configuration_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_kata_config: LoadKataConfigFromDict = load_kata_config_from_dict_in_memory
    _assert_load_rated_items: LoadRatedItems = RecordStore().load_rated_items
    _assert_load_products: LoadProducts = RecordStore().load_products
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "RecordStore",
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_kata_config_from_dict_in_memory",
]
