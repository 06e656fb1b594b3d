"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.scheduler` - Delayed task scheduler and the delayed square use case
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DeployConfiguration,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadKataConfigFromDict,
    LoadProducts,
    LoadRatedItems,
)
from .scheduler import (
    SQUARE_DELAY_SECONDS,
    DelayedTask,
    TimerScheduler,
    compute_delayed_square,
    compute_delayed_squares,
    schedule_delayed_square,
)

__all__ = [
    # Ports
    "DeployConfiguration",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadKataConfigFromDict",
    "LoadProducts",
    "LoadRatedItems",
    # Scheduler
    "SQUARE_DELAY_SECONDS",
    "DelayedTask",
    "TimerScheduler",
    "compute_delayed_square",
    "compute_delayed_squares",
    "schedule_delayed_square",
]
