"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - The exercise functions and the square outcome rule
    * :mod:`.models` - Immutable exercise records
    * :mod:`.results` - ``Ok``/``Err`` result type
    * :mod:`.enums` - Domain enumerations (Day, DayType, OutputFormat, DeployTarget)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    MIN_RATING,
    concatenate_arrays,
    filter_by_rating,
    format_string,
    get_day_type,
    get_most_expensive_product,
    process_value,
    square_outcome,
)
from .enums import Day, DayType, DeployTarget, OutputFormat
from .errors import NEGATIVE_INPUT_MESSAGE, ConfigurationError, NegativeInputError, RecordsError
from .models import Car, Product, RatedItem, Vehicle
from .results import Err, Ok, Result

__all__ = [
    # Behaviors
    "MIN_RATING",
    "concatenate_arrays",
    "filter_by_rating",
    "format_string",
    "get_day_type",
    "get_most_expensive_product",
    "process_value",
    "square_outcome",
    # Models
    "Car",
    "Product",
    "RatedItem",
    "Vehicle",
    # Results
    "Err",
    "Ok",
    "Result",
    # Enums
    "Day",
    "DayType",
    "DeployTarget",
    "OutputFormat",
    # Errors
    "NEGATIVE_INPUT_MESSAGE",
    "ConfigurationError",
    "NegativeInputError",
    "RecordsError",
]
