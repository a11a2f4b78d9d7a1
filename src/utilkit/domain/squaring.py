"""Delayed asynchronous squaring on the asyncio event loop.

Each call validates its input, suspends cooperatively for a fixed delay, and
resolves to the square. Calls share no state, so any number of them can be
awaited concurrently and each finishes after its own delay.

Contents:
    * :data:`SQUARE_DELAY_MS` - the fixed delay in milliseconds.
    * :func:`square_async` - coroutine resolving to ``n * n``.
    * :func:`schedule_square` - eager-validating task factory.
    * :func:`square_many` - concurrent squares in input order.
"""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Iterable
from typing import Final

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

Number = int | float

#: Fixed delay before a square resolves, in milliseconds.
SQUARE_DELAY_MS: Final[float] = 1000

NEGATIVE_NUMBER_MESSAGE: Final[str] = "Negative number not allowed"


def _validate(n: Number, delay_ms: float) -> None:
    if n < 0:
        raise InvalidArgumentError(NEGATIVE_NUMBER_MESSAGE)
    if not math.isfinite(n):
        raise InvalidArgumentError(f"Number must be finite, got {n}")
    if not (math.isfinite(delay_ms) and delay_ms >= 0):
        raise InvalidArgumentError(f"Delay must be a finite, non-negative number of milliseconds, got {delay_ms}")


async def square_async(n: Number, *, delay_ms: float = SQUARE_DELAY_MS) -> Number:
    """Resolve to ``n * n`` after *delay_ms* milliseconds.

    Negative input fails before any suspension, so the caller sees the
    error without waiting for the delay.

    Args:
        n: Number to square.
        delay_ms: Milliseconds to wait before resolving.

    Returns:
        The square of *n*.

    Raises:
        InvalidArgumentError: If *n* is negative or not finite, or the delay
            is negative or not finite.

    Example:
        >>> asyncio.run(square_async(3, delay_ms=0))
        9
    """
    _validate(n, delay_ms)
    logger.debug("Squaring %s after %s ms", n, delay_ms)
    await asyncio.sleep(delay_ms / 1000)
    return n * n


def schedule_square(n: Number, *, delay_ms: float = SQUARE_DELAY_MS) -> asyncio.Task[Number]:
    """Schedule :func:`square_async` on the running loop and return its task.

    Validation happens here, before the task exists, so negative input
    raises synchronously. Must be called while an event loop is running.

    Raises:
        InvalidArgumentError: If *n* or *delay_ms* is negative or not finite.
    """
    _validate(n, delay_ms)
    return asyncio.create_task(square_async(n, delay_ms=delay_ms))


async def square_many(values: Iterable[Number], *, delay_ms: float = SQUARE_DELAY_MS) -> list[Number]:
    """Square all *values* concurrently and return results in input order.

    Every value is validated before anything is scheduled.

    Raises:
        InvalidArgumentError: If any value or *delay_ms* is negative or not finite.

    Example:
        >>> asyncio.run(square_many([1, 2, 3], delay_ms=0))
        [1, 4, 9]
    """
    numbers = list(values)
    for n in numbers:
        _validate(n, delay_ms)
    return list(await asyncio.gather(*(square_async(n, delay_ms=delay_ms) for n in numbers)))


__all__ = [
    "NEGATIVE_NUMBER_MESSAGE",
    "SQUARE_DELAY_MS",
    "schedule_square",
    "square_async",
    "square_many",
]
