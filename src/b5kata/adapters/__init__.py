"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Configuration loading, deployment, display, and settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.records` - JSON record files for the data exercises
    * :mod:`.memory` - In-memory port implementations for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
