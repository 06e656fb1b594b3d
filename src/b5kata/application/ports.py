"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``,
    ``KataConfig``) are imported under ``TYPE_CHECKING`` only so that the
    application layer stays free of adapter imports at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import DeployTarget, OutputFormat
from ..domain.models import Product, RatedItem

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.kata import KataConfig


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DeployConfiguration(Protocol):
    """Deploy default configuration to specified target layers."""

    def __call__(
        self,
        *,
        targets: Sequence[DeployTarget],
        force: bool = ...,
        profile: str | None = ...,
        set_permissions: bool = ...,
    ) -> list[Path]: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadKataConfigFromDict(Protocol):
    """Load KataConfig from the ``[b5kata]`` configuration section."""

    def __call__(self, config_dict: Mapping[str, Any]) -> KataConfig: ...


class LoadRatedItems(Protocol):
    """Read rated items from a JSON file."""

    def __call__(self, path: Path) -> list[RatedItem]: ...


class LoadProducts(Protocol):
    """Read products from a JSON file."""

    def __call__(self, path: Path) -> list[Product]: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DeployConfiguration",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadKataConfigFromDict",
    "LoadProducts",
    "LoadRatedItems",
]
