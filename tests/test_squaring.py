"""Delayed square stories: resolution, eager failure, and concurrency."""

from __future__ import annotations

import asyncio
import time

import pytest

from utilkit.domain.errors import InvalidArgumentError
from utilkit.domain.squaring import (
    NEGATIVE_NUMBER_MESSAGE,
    SQUARE_DELAY_MS,
    schedule_square,
    square_async,
    square_many,
)

SHORT_DELAY_MS = 50


@pytest.mark.os_agnostic
def test_default_delay_is_one_second() -> None:
    """The fixed delay is 1000 milliseconds."""
    assert SQUARE_DELAY_MS == 1000


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_square_async_resolves_to_square() -> None:
    """A non-negative input resolves to its square."""
    assert await square_async(7, delay_ms=0) == 49


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_square_async_squares_floats() -> None:
    """Fractional input is squared as well."""
    assert await square_async(1.5, delay_ms=0) == 2.25


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_square_async_waits_at_least_the_delay() -> None:
    """Resolution happens no earlier than the delay."""
    loop = asyncio.get_running_loop()
    started = loop.time()

    await square_async(3, delay_ms=SHORT_DELAY_MS)

    # the loop may fire a timer up to one clock tick early
    assert loop.time() - started >= SHORT_DELAY_MS / 1000 - time.get_clock_info("monotonic").resolution


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_square_async_without_delay_argument_waits_one_second() -> None:
    """The default call is still pending just before 1000 ms and then resolves."""
    task = asyncio.create_task(square_async(3))

    await asyncio.sleep(0.95)
    assert not task.done()

    assert await task == 9


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_square_async_rejects_negative_without_waiting() -> None:
    """Negative input fails with the literal message and no delay."""
    started = time.monotonic()

    with pytest.raises(InvalidArgumentError, match=NEGATIVE_NUMBER_MESSAGE):
        await square_async(-1)

    assert time.monotonic() - started < 0.5


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_square_async_of_zero_is_zero() -> None:
    """Zero is not negative and squares to zero."""
    assert await square_async(0, delay_ms=0) == 0


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_concurrent_squares_overlap() -> None:
    """Three concurrent calls take far less than three delays."""
    delay_ms = 200
    loop = asyncio.get_running_loop()
    started = loop.time()

    results = await asyncio.gather(*(square_async(n, delay_ms=delay_ms) for n in (1, 2, 3)))

    assert results == [1, 4, 9]
    assert loop.time() - started < 2 * delay_ms / 1000


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_schedule_square_returns_task_handle() -> None:
    """schedule_square hands back an awaitable Task."""
    task = schedule_square(5, delay_ms=0)

    assert isinstance(task, asyncio.Task)
    assert await task == 25


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_schedule_square_rejects_negative_before_creating_task() -> None:
    """Validation happens synchronously, before a task exists."""
    tasks_before = len(asyncio.all_tasks())

    with pytest.raises(InvalidArgumentError, match=NEGATIVE_NUMBER_MESSAGE):
        schedule_square(-2)

    assert len(asyncio.all_tasks()) == tasks_before


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_square_many_preserves_input_order() -> None:
    """Results line up with the inputs."""
    assert await square_many([3, 1, 2], delay_ms=0) == [9, 1, 4]


@pytest.mark.os_agnostic
@pytest.mark.asyncio
async def test_square_many_rejects_any_negative_up_front() -> None:
    """One negative value fails the batch before any waiting."""
    started = time.monotonic()

    with pytest.raises(InvalidArgumentError):
        await square_many([1, -1, 2])

    assert time.monotonic() - started < 0.5


@pytest.mark.os_agnostic
def test_square_async_runs_under_asyncio_run() -> None:
    """The coroutine is usable from synchronous code via asyncio.run."""
    assert asyncio.run(square_async(4, delay_ms=0)) == 16


@pytest.mark.os_agnostic
@pytest.mark.asyncio
@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
async def test_square_async_rejects_non_finite_numbers(value: float) -> None:
    """NaN and infinities never reach the delay."""
    with pytest.raises(InvalidArgumentError):
        await square_async(value, delay_ms=0)


@pytest.mark.os_agnostic
@pytest.mark.asyncio
@pytest.mark.parametrize("delay_ms", [float("inf"), float("nan"), -1])
async def test_invalid_delay_is_rejected_before_scheduling(delay_ms: float) -> None:
    """A delay that could never elapse, or is negative, fails up front."""
    with pytest.raises(InvalidArgumentError, match="Delay must be"):
        schedule_square(2, delay_ms=delay_ms)
    with pytest.raises(InvalidArgumentError, match="Delay must be"):
        await square_many([2], delay_ms=delay_ms)
