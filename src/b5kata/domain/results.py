"""Two-variant result type for computations that either succeed or fail.

``Ok`` carries a value, ``Err`` carries the exception describing the failure.
Neither variant raises on construction; callers decide whether to branch on
the variant or :meth:`unwrap` it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome holding ``value``.

    Example:
        >>> Ok(25).unwrap()
        25
        >>> Ok(25).is_ok()
        True
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome holding the exception that describes it.

    Example:
        >>> err = Err(ValueError("bad input"))
        >>> err.reason
        'bad input'
        >>> err.unwrap()
        Traceback (most recent call last):
        ...
        ValueError: bad input
    """

    error: E

    @property
    def reason(self) -> str:
        """Return the human-readable failure message."""
        return str(self.error)

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Ok[T], Err[E]]
"""Either an :class:`Ok` or an :class:`Err`."""


__all__ = ["Err", "Ok", "Result"]
