"""Type-safe domain enums for weekdays, output formats, and deployment targets."""

from __future__ import annotations

from enum import Enum, IntEnum


class Day(IntEnum):
    """Days of the week, numbered from Monday (0) to Sunday (6).

    Example:
        >>> Day.SATURDAY.value
        5
        >>> Day["FRIDAY"] is Day.FRIDAY
        True
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class DayType(str, Enum):
    """Classification of a :class:`Day`.

    Inherits from str so results compare equal to their display text.

    Example:
        >>> DayType.WEEKEND == "Weekend"
        True
    """

    WEEKDAY = "Weekday"
    WEEKEND = "Weekend"


class OutputFormat(str, Enum):
    """Output format options for configuration and exercise display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(str, Enum):
    """Configuration deployment target layers.

    Attributes:
        APP: System-wide application configuration (requires privileges).
        HOST: System-wide host-specific configuration (requires privileges).
        USER: User-specific configuration (~/.config on Linux).

    Example:
        >>> DeployTarget.USER.value
        'user'
    """

    APP = "app"
    HOST = "host"
    USER = "user"


__all__ = [
    "Day",
    "DayType",
    "DeployTarget",
    "OutputFormat",
]
