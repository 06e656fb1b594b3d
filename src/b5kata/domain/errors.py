"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from typing import Final

NEGATIVE_INPUT_MESSAGE: Final[str] = "Error: Negative number not allowed"


class NegativeInputError(ValueError):
    """A computation that only accepts non-negative numbers received a negative one.

    The message defaults to the fixed text shown to users, so the error can be
    raised without arguments. Inherits from ValueError so generic argument
    validation handlers catch it as well.

    Example:
        >>> from b5kata.domain.errors import NegativeInputError
        >>> str(NegativeInputError())
        'Error: Negative number not allowed'
        >>> isinstance(NegativeInputError(), ValueError)
        True
    """

    def __init__(self, message: str = NEGATIVE_INPUT_MESSAGE) -> None:
        super().__init__(message)


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[b5kata]`` section holds values that fail validation.
    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from b5kata.domain.errors import ConfigurationError
        >>> err = ConfigurationError("Invalid output_format 'xml'")
        >>> str(err)
        "Invalid output_format 'xml'"
    """


class RecordsError(ValueError):
    """A JSON record file could not be parsed into exercise records.

    Example:
        >>> from b5kata.domain.errors import RecordsError
        >>> str(RecordsError("items.json: expected a JSON array"))
        'items.json: expected a JSON array'
    """


__all__ = [
    "NEGATIVE_INPUT_MESSAGE",
    "ConfigurationError",
    "NegativeInputError",
    "RecordsError",
]
