"""Fold and reduce over sequences of Options.

Every function makes a single pass over its input through one scoped cursor,
which is closed on normal completion, on early exit, and when a step raises.

An absent item (`Nothing`) contributes nothing: it is skipped rather than
ending the fold. Only a step function can stop a `*_until` fold early, by
returning `Nothing`, in which case the remaining items are never pulled.

Examples:
    >>> fold([Some(1), Nothing, Some(2)], 0, operator.add)
    3
    >>> fold_until([Some(1), Some(2)], 0, lambda acc, x: Some(acc + x))
    Some(value=3)
    >>> reduce([Some(2), Some(5)], max)
    Some(value=5)
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable, Coroutine, Iterable, Iterator
from typing import Any

from switchyard._internal.cursor import acursor, cursor
from switchyard._logging import get_logger
from switchyard.assertions import require
from switchyard.types.option import Nothing, NothingType, Option, Some

__all__ = [
    'fold',
    'fold_async',
    'fold_until',
    'fold_until_async',
    'reduce',
    'reduce_async',
    'reduce_until',
    'reduce_until_async',
    'try_reduce',
    'try_reduce_async',
    'try_reduce_until',
    'try_reduce_until_async',
    'unroll',
]

logger = get_logger(__name__)

type Faults = tuple[type[BaseException], ...]


# --- Folds ---


def fold[T, A](options: Iterable[Option[T]], seed: A | Option[A], step: Callable[[A, T], A]) -> A | Option[A]:
    """Left fold over the present values.

    Args:
        options: The options to fold, consumed once.
        seed: The initial accumulator. An Option seed folds from its value
            and the outcome is wrapped in Some; a Nothing seed yields Nothing
            without pulling any item.
        step: Combines the accumulator with each present value.

    Returns:
        The final accumulator (seed when nothing is present).
    """
    require(step, 'step')
    if isinstance(seed, Some | NothingType):
        return seed.map(lambda start: fold(options, start, step))
    acc = seed
    with cursor(options) as items:
        for option in items:
            acc = option.fold(acc, step)
    return acc


def fold_until[T, A](
    options: Iterable[Option[T]], seed: A | Option[A], step: Callable[[A, T], Option[A]]
) -> Option[A]:
    """Left fold that the step function can stop early.

    Args:
        options: The options to fold, consumed once.
        seed: The initial accumulator. A Some seed folds from its value; a
            Nothing seed yields Nothing without pulling any item.
        step: Returns Some(new accumulator) to continue or Nothing to stop.

    Returns:
        Some(final accumulator), or Nothing as soon as step returns Nothing.
    """
    require(step, 'step')
    if isinstance(seed, Some | NothingType):
        return seed.bind(lambda start: fold_until(options, start, step))
    acc = seed
    with cursor(options) as items:
        for option in items:
            outcome = option.fold_until(acc, step)
            if not isinstance(outcome, Some):
                return Nothing
            acc = outcome.value
    return Some(acc)


def fold_async[T, A](
    options: Iterable[Option[T]] | AsyncIterable[Option[T]],
    seed: A | Option[A],
    step: Callable[[A, T], Awaitable[A]],
) -> Coroutine[Any, Any, A | Option[A]]:
    """Async form of fold: step is awaited for each present value.

    An Option seed behaves as in `fold`.
    """
    require(step, 'step')
    if isinstance(seed, Some | NothingType):
        return seed.map_async(lambda start: fold_async(options, start, step))

    async def _fold() -> A:
        acc = seed
        async with acursor(options) as items:
            async for option in items:
                acc = await option.fold_async(acc, step)
        return acc

    return _fold()


def fold_until_async[T, A](
    options: Iterable[Option[T]] | AsyncIterable[Option[T]],
    seed: A | Option[A],
    step: Callable[[A, T], Awaitable[Option[A]]],
) -> Coroutine[Any, Any, Option[A]]:
    """Async form of fold_until: step is awaited for each present value.

    An Option seed behaves as in `fold_until`.
    """
    require(step, 'step')
    if isinstance(seed, Some | NothingType):
        return seed.bind_async(lambda start: fold_until_async(options, start, step))

    async def _fold() -> Option[A]:
        acc = seed
        async with acursor(options) as items:
            async for option in items:
                outcome = await option.fold_until_async(acc, step)
                if not isinstance(outcome, Some):
                    return Nothing
                acc = outcome.value
        return Some(acc)

    return _fold()


# --- Reductions ---


def _reduce[T](items: Iterator[Option[T]], step: Callable[[T, T], Option[T]]) -> Option[T]:
    acc: Option[T] = Nothing
    for option in items:
        if not isinstance(option, Some):
            continue
        if not isinstance(acc, Some):
            acc = option
            continue
        acc = step(acc.value, option.value)
        if not isinstance(acc, Some):
            return Nothing
    return acc


async def _reduce_async[T](
    items: AsyncIterator[Option[T]], step: Callable[[T, T], Awaitable[Option[T]]]
) -> Option[T]:
    acc: Option[T] = Nothing
    async for option in items:
        if not isinstance(option, Some):
            continue
        if not isinstance(acc, Some):
            acc = option
            continue
        acc = await step(acc.value, option.value)
        if not isinstance(acc, Some):
            return Nothing
    return acc


def _always[T](step: Callable[[T, T], T]) -> Callable[[T, T], Option[T]]:
    def continued(acc: T, value: T) -> Option[T]:
        return Some(step(acc, value))

    return continued


def _always_async[T](step: Callable[[T, T], Awaitable[T]]) -> Callable[[T, T], Awaitable[Option[T]]]:
    async def continued(acc: T, value: T) -> Option[T]:
        return Some(await step(acc, value))

    return continued


def _captured(exc: BaseException) -> Option[Any]:
    logger.debug('step_fault_captured', error=repr(exc), exc_info=exc)
    return Nothing


def _attempt[T](step: Callable[[T, T], Option[T]], faults: Faults) -> Callable[[T, T], Option[T]]:
    """Run step, turning a listed fault into Nothing."""

    def attempted(acc: T, value: T) -> Option[T]:
        try:
            outcome: Option[Option[T]] = Some(step(acc, value))
        except faults as exc:
            outcome = _captured(exc)
        return outcome.flatten()

    return attempted


def _attempt_async[T](
    step: Callable[[T, T], Awaitable[Option[T]]], faults: Faults
) -> Callable[[T, T], Awaitable[Option[T]]]:
    async def attempted(acc: T, value: T) -> Option[T]:
        try:
            outcome: Option[Option[T]] = Some(await step(acc, value))
        except faults as exc:
            outcome = _captured(exc)
        return outcome.flatten()

    return attempted


def reduce[T](options: Iterable[Option[T]], step: Callable[[T, T], T]) -> Option[T]:
    """Reduce the present values without a seed.

    The first present value is the initial accumulator.

    Args:
        options: The options to reduce, consumed once.
        step: Combines the accumulator with the next present value.

    Returns:
        Some(result), or Nothing when no value is present.
    """
    require(step, 'step')
    with cursor(options) as items:
        return _reduce(items, _always(step))


def reduce_until[T](options: Iterable[Option[T]], step: Callable[[T, T], Option[T]]) -> Option[T]:
    """Reduce the present values; step may return Nothing to stop with Nothing."""
    require(step, 'step')
    with cursor(options) as items:
        return _reduce(items, step)


def try_reduce[T](
    options: Iterable[Option[T]],
    step: Callable[[T, T], T],
    *,
    exceptions: Faults = (Exception,),
) -> Option[T]:
    """Reduce like `reduce`, but a fault raised by step yields Nothing.

    Args:
        options: The options to reduce, consumed once.
        step: Combines the accumulator with the next present value.
        exceptions: Exception types to capture. Others propagate.

    Returns:
        Some(result), or Nothing when no value is present or step raised.
    """
    require(step, 'step')
    with cursor(options) as items:
        return _reduce(items, _attempt(_always(step), exceptions))


def try_reduce_until[T](
    options: Iterable[Option[T]],
    step: Callable[[T, T], Option[T]],
    *,
    exceptions: Faults = (Exception,),
) -> Option[T]:
    """Reduce like `reduce_until`, but a fault raised by step yields Nothing."""
    require(step, 'step')
    with cursor(options) as items:
        return _reduce(items, _attempt(step, exceptions))


def reduce_async[T](
    options: Iterable[Option[T]] | AsyncIterable[Option[T]],
    step: Callable[[T, T], Awaitable[T]],
) -> Coroutine[Any, Any, Option[T]]:
    """Async form of reduce."""
    require(step, 'step')

    async def _run() -> Option[T]:
        async with acursor(options) as items:
            return await _reduce_async(items, _always_async(step))

    return _run()


def reduce_until_async[T](
    options: Iterable[Option[T]] | AsyncIterable[Option[T]],
    step: Callable[[T, T], Awaitable[Option[T]]],
) -> Coroutine[Any, Any, Option[T]]:
    """Async form of reduce_until."""
    require(step, 'step')

    async def _run() -> Option[T]:
        async with acursor(options) as items:
            return await _reduce_async(items, step)

    return _run()


def try_reduce_async[T](
    options: Iterable[Option[T]] | AsyncIterable[Option[T]],
    step: Callable[[T, T], Awaitable[T]],
    *,
    exceptions: Faults = (Exception,),
) -> Coroutine[Any, Any, Option[T]]:
    """Async form of try_reduce."""
    require(step, 'step')

    async def _run() -> Option[T]:
        async with acursor(options) as items:
            return await _reduce_async(items, _attempt_async(_always_async(step), exceptions))

    return _run()


def try_reduce_until_async[T](
    options: Iterable[Option[T]] | AsyncIterable[Option[T]],
    step: Callable[[T, T], Awaitable[Option[T]]],
    *,
    exceptions: Faults = (Exception,),
) -> Coroutine[Any, Any, Option[T]]:
    """Async form of try_reduce_until."""
    require(step, 'step')

    async def _run() -> Option[T]:
        async with acursor(options) as items:
            return await _reduce_async(items, _attempt_async(step, exceptions))

    return _run()


# --- Collection ---


def unroll[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Collect every value into one list, or Nothing if any item is absent."""
    values: list[T] = []
    with cursor(options) as items:
        for option in items:
            if not isinstance(option, Some):
                return Nothing
            values.append(option.value)
    return Some(values)
