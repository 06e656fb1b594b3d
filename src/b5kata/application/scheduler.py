"""Timer-driven delayed tasks on an asyncio event loop.

A unit of work is submitted to a :class:`TimerScheduler` together with a
delay. The scheduler registers a single ``call_later`` timer and hands back a
:class:`DelayedTask` whose result slot is filled with an ``Ok``/``Err`` when
the timer fires. Tasks share nothing: each owns its timer and its slot, and
none of them can be cancelled through this API.

Contents:
    * :data:`SQUARE_DELAY_SECONDS` - fixed wait before a square succeeds.
    * :class:`DelayedTask` - awaitable handle with listener support.
    * :class:`TimerScheduler` - submits work with a deferred completion.
    * :func:`schedule_delayed_square` / :func:`compute_delayed_square` -
      the delayed square computation.
    * :func:`compute_delayed_squares` - run several squares concurrently.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Generator, Iterable
from typing import Any, Final, Generic, TypeVar

from ..domain.behaviors import square_outcome
from ..domain.errors import NegativeInputError
from ..domain.results import Err, Ok

logger = logging.getLogger(__name__)

T = TypeVar("T")

Outcome = Ok[T] | Err[BaseException]
"""What a delayed task resolves to."""

#: Fixed wait before a non-negative square becomes observable.
SQUARE_DELAY_SECONDS: Final[float] = 1.0


class DelayedTask(Generic[T]):
    """Handle on a unit of work whose outcome becomes available later.

    Awaiting the task yields the ``Ok``/``Err`` outcome and never raises for a
    failed computation; call ``unwrap()`` on the outcome to turn an ``Err``
    into its exception.
    """

    __slots__ = ("_future",)

    def __init__(self, future: asyncio.Future[Outcome[T]]) -> None:
        self._future = future

    def done(self) -> bool:
        """Return True once the outcome is available."""
        return self._future.done()

    def outcome(self) -> Outcome[T]:
        """Return the outcome.

        Raises:
            asyncio.InvalidStateError: While the task is still pending.
        """
        return self._future.result()

    def add_listener(self, listener: Callable[[Outcome[T]], Any]) -> None:
        """Call ``listener`` with the outcome once it is available.

        Listeners run on the event loop, one call each, in registration
        order. A listener added after completion is still called.
        """

        def _notify(future: asyncio.Future[Outcome[T]]) -> None:
            if not future.cancelled():
                listener(future.result())

        self._future.add_done_callback(_notify)

    def __await__(self) -> Generator[Any, None, Outcome[T]]:
        return self._future.__await__()


def _complete(future: asyncio.Future[Outcome[T]], work: Callable[[], Outcome[T]]) -> None:
    """Run ``work`` and store its outcome, capturing raised exceptions as ``Err``."""
    if future.done():
        return
    try:
        outcome = work()
    except Exception as exc:
        logger.warning("Delayed work raised", extra={"error": str(exc), "error_type": type(exc).__name__})
        outcome = Err(exc)
    future.set_result(outcome)


class TimerScheduler:
    """Submit units of work that complete after a delay.

    Args:
        loop: Event loop to schedule on. When None, the loop running at
            :meth:`submit` time is used, so submitting outside a running loop
            raises ``RuntimeError``.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def submit(self, work: Callable[[], Outcome[T]], *, delay: float = 0.0) -> DelayedTask[T]:
        """Schedule ``work`` to run after ``delay`` seconds.

        A delay of zero or less completes the task before this method
        returns, without touching the timer queue.
        """
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        future: asyncio.Future[Outcome[T]] = loop.create_future()
        if delay <= 0:
            _complete(future, work)
        else:
            loop.call_later(delay, _complete, future, work)
        return DelayedTask(future)


def schedule_delayed_square(n: float, *, scheduler: TimerScheduler | None = None) -> DelayedTask[float]:
    """Submit the square of ``n``; negative input fails without waiting.

    Args:
        n: Real number to square.
        scheduler: Scheduler to submit to. Defaults to one bound to the
            running loop.

    Returns:
        Task resolving to ``Ok(n * n)`` after :data:`SQUARE_DELAY_SECONDS`,
        or already resolved to ``Err(NegativeInputError())`` when ``n < 0``.

    Raises:
        TypeError: If ``n`` is not a real number.
        RuntimeError: If no scheduler is given and no event loop is running.
    """
    outcome = square_outcome(n)
    delay = SQUARE_DELAY_SECONDS if outcome.is_ok() else 0.0
    logger.debug("Scheduling delayed square", extra={"input": n, "delay": delay})
    active = scheduler if scheduler is not None else TimerScheduler()
    return active.submit(lambda: outcome, delay=delay)


async def compute_delayed_square(n: float) -> float:
    """Return ``n * n`` after the fixed delay.

    Raises:
        NegativeInputError: Immediately, when ``n`` is negative.
        TypeError: If ``n`` is not a real number.

    Example:
        >>> asyncio.run(compute_delayed_square(5))  # doctest: +SKIP
        25
    """
    outcome = await schedule_delayed_square(n)
    return outcome.unwrap()


async def compute_delayed_squares(
    values: Iterable[float],
    *,
    on_outcome: Callable[[float, Ok[float] | Err[NegativeInputError]], Any] | None = None,
) -> list[Ok[float] | Err[NegativeInputError]]:
    """Square every value concurrently and return the outcomes in input order.

    All squares are scheduled before any is awaited, so the whole batch takes
    one delay rather than one per value. ``on_outcome`` is called with
    ``(value, outcome)`` as each one settles, failures first.
    """
    scheduler = TimerScheduler()
    pending = [(value, schedule_delayed_square(value, scheduler=scheduler)) for value in values]

    async def _settle(value: float, task: DelayedTask[float]) -> Ok[float] | Err[NegativeInputError]:
        outcome = await task
        if on_outcome is not None:
            on_outcome(value, outcome)
        return outcome  # type: ignore[return-value]

    return list(await asyncio.gather(*(_settle(value, task) for value, task in pending)))


__all__ = [
    "SQUARE_DELAY_SECONDS",
    "DelayedTask",
    "Outcome",
    "TimerScheduler",
    "compute_delayed_square",
    "compute_delayed_squares",
    "schedule_delayed_square",
]
