"""Small typed kata library: a delayed square plus seven warm-up exercises.

The public API re-exports the pieces most callers need:

- Domain: the exercise functions and their record types
- Application: the awaitable delayed square
- Composition: the layered configuration loader
- Metadata: package information

Example:
    >>> import asyncio
    >>> asyncio.run(compute_delayed_square(3))  # doctest: +SKIP
    9
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.scheduler import compute_delayed_square, compute_delayed_squares, schedule_delayed_square

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    concatenate_arrays,
    filter_by_rating,
    format_string,
    get_day_type,
    get_most_expensive_product,
    process_value,
)
from .domain.enums import Day, DayType
from .domain.errors import NegativeInputError
from .domain.models import Car, Product, RatedItem, Vehicle
from .domain.results import Err, Ok

__all__ = [
    "Car",
    "Day",
    "DayType",
    "Err",
    "NegativeInputError",
    "Ok",
    "Product",
    "RatedItem",
    "Vehicle",
    "compute_delayed_square",
    "compute_delayed_squares",
    "concatenate_arrays",
    "filter_by_rating",
    "format_string",
    "get_config",
    "get_day_type",
    "get_most_expensive_product",
    "print_info",
    "process_value",
    "schedule_delayed_square",
]
