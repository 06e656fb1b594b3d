"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from numbers import Real
from typing import Final, TypeVar

from .enums import Day, DayType
from .errors import NegativeInputError
from .models import Product, RatedItem
from .results import Err, Ok

T = TypeVar("T")

#: Lowest rating kept by :func:`filter_by_rating`.
MIN_RATING: Final[int] = 4

_WEEKEND: Final[frozenset[Day]] = frozenset({Day.SATURDAY, Day.SUNDAY})


def format_string(text: str, to_upper: bool | None = True) -> str:
    """Return ``text`` upper-cased, or lower-cased when ``to_upper`` is false.

    ``None`` counts as unset and upper-cases.

    Example:
        >>> format_string("Hello")
        'HELLO'
        >>> format_string("Hello", to_upper=None)
        'HELLO'
        >>> format_string("Hello", to_upper=False)
        'hello'
    """
    if to_upper is None:
        return text.upper()
    return text.upper() if to_upper else text.lower()


def filter_by_rating(items: Iterable[RatedItem]) -> list[RatedItem]:
    """Keep the items rated :data:`MIN_RATING` or higher, in their original order.

    Example:
        >>> items = [RatedItem("A", 4.5), RatedItem("B", 3.2), RatedItem("C", 4.0)]
        >>> [item.title for item in filter_by_rating(items)]
        ['A', 'C']
    """
    return [item for item in items if item.rating >= MIN_RATING]


def concatenate_arrays(*arrays: Iterable[T]) -> list[T]:
    """Join any number of sequences into one new list, preserving order.

    Example:
        >>> concatenate_arrays(["a", "b"], ["c"])
        ['a', 'b', 'c']
        >>> concatenate_arrays()
        []
    """
    joined: list[T] = []
    for array in arrays:
        joined.extend(array)
    return joined


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def process_value(value: str | float) -> int | float:
    """Return the length of a string, or double a number.

    Args:
        value: A string or a real number.

    Returns:
        ``len(value)`` for strings, ``value * 2`` for numbers.

    Raises:
        TypeError: If ``value`` is neither a string nor a real number.

    Example:
        >>> process_value("hello")
        5
        >>> process_value(10)
        20
    """
    if isinstance(value, str):
        return len(value)
    if _is_number(value):
        return value * 2
    raise TypeError(f"Expected str or number, got {type(value).__name__}")


def _pricier(current: Product, candidate: Product) -> Product:
    return current if current.price > candidate.price else candidate


def get_most_expensive_product(products: Sequence[Product]) -> Product | None:
    """Return the highest-priced product, or None for an empty sequence.

    When several products share the top price the last of them wins.

    Example:
        >>> products = [Product("Pen", 10), Product("Notebook", 25), Product("Bag", 50)]
        >>> get_most_expensive_product(products)
        Product(name='Bag', price=50)
        >>> get_most_expensive_product([]) is None
        True
    """
    if not products:
        return None
    return reduce(_pricier, products)


def get_day_type(day: Day) -> DayType:
    """Classify ``day`` as a weekday or a weekend day.

    Example:
        >>> get_day_type(Day.MONDAY)
        <DayType.WEEKDAY: 'Weekday'>
        >>> get_day_type(Day.SUNDAY) == "Weekend"
        True
    """
    return DayType.WEEKEND if day in _WEEKEND else DayType.WEEKDAY


def square_outcome(n: float) -> Ok[float] | Err[NegativeInputError]:
    """Decide the outcome of squaring ``n`` without any timing.

    Zero is a valid input. Non-integers square arithmetically.

    Raises:
        TypeError: If ``n`` is not a real number (``bool`` included).

    Example:
        >>> square_outcome(2.5)
        Ok(value=6.25)
        >>> square_outcome(-3).reason
        'Error: Negative number not allowed'
    """
    if not _is_number(n):
        raise TypeError(f"Expected a real number, got {type(n).__name__}")
    if n < 0:
        return Err(NegativeInputError())
    return Ok(n * n)


__all__ = [
    "MIN_RATING",
    "concatenate_arrays",
    "filter_by_rating",
    "format_string",
    "get_day_type",
    "get_most_expensive_product",
    "process_value",
    "square_outcome",
]
