"""Accumulating folds over sequences of Results.

Unlike `bind`, these never short-circuit: every result is visited, and all
failures are merged left to right. Errors merge with the `combine`
typeclass unless an explicit `merge` is given, so `Messages` errors collect
every message in order.

Examples:
    >>> unroll([Ok(1), Ok(2)])
    Ok(value=[1, 2])
    >>> unroll([Ok(1), fail_with('a'), fail_with('b')])
    Fail(error=('a', 'b'))
    >>> fold([Ok(1), Ok(2)], 10, operator.add)
    Ok(value=13)
"""

from __future__ import annotations

from collections.abc import AsyncIterable, Awaitable, Callable, Coroutine, Iterable
from typing import Any

from switchyard._internal.cursor import acursor, cursor
from switchyard._internal.deferred import settle
from switchyard.assertions import require
from switchyard.errors import EmptySequenceError
from switchyard.types.result import Fail, Ok, Result

__all__ = [
    'aggregate',
    'aggregate_async',
    'fold',
    'fold_async',
    'plus_async',
    'plus_with_async',
    'unroll',
    'unroll_async',
]

type Deferrable[T] = T | Awaitable[T]
type Merge[E] = Callable[[E, E], E]

_EMPTY: Any = object()


def _check(func: Callable[..., Any] | None, merge: Callable[..., Any] | None) -> None:
    if func is not None:
        require(func, 'func')
    if merge is not None:
        require(merge, 'merge')


def _seeded[A, E](seed: A | Result[A, E]) -> Result[A, E]:
    if isinstance(seed, Ok | Fail):
        return seed
    return Ok(seed)


def _append[T](values: list[T], value: T) -> list[T]:
    values.append(value)
    return values


# --- Sync ---


def fold[T, A, E](
    results: Iterable[Result[T, E]],
    seed: A | Result[A, E],
    func: Callable[[A, T], A],
    *,
    merge: Merge[E] | None = None,
) -> Result[A, E]:
    """Fold results into an accumulator, collecting every failure.

    Args:
        results: The results to fold, consumed once.
        seed: The initial accumulator. A plain value is wrapped in Ok; a
            Result (including a Fail) is used as is.
        func: Combines the accumulator with each Ok value.
        merge: Combines two errors. Defaults to the `combine` typeclass.

    Returns:
        Ok(accumulator) if the seed and every result succeeded, otherwise
        Fail with all errors merged in order.
    """
    require(func, 'func')
    _check(None, merge)
    acc = _seeded(seed)
    with cursor(results) as items:
        for result in items:
            acc = acc.plus_with(result, func, merge)
    return acc


def aggregate[T, E](
    results: Iterable[Result[T, E]],
    func: Callable[[T, T], T] | None = None,
    *,
    merge: Merge[E] | None = None,
) -> Result[T, E]:
    """Fold results pairwise with no seed; the first result starts the fold.

    Args:
        results: The results to aggregate, consumed once.
        func: Combines two Ok values. Defaults to the `combine` typeclass.
        merge: Combines two errors. Defaults to the `combine` typeclass.

    Raises:
        EmptySequenceError: If results is empty.
    """
    _check(func, merge)
    with cursor(results) as items:
        acc = next(items, _EMPTY)
        if acc is _EMPTY:
            raise EmptySequenceError('aggregate')
        for result in items:
            acc = acc.plus_with(result, func, merge)
    return acc


def unroll[T, E](results: Iterable[Result[T, E]], *, merge: Merge[E] | None = None) -> Result[list[T], E]:
    """Collect all Ok values into one list, or merge every error."""
    return fold(results, [], _append, merge=merge)


# --- Async ---


def plus_async[T, U, E](
    left: Deferrable[Result[T, E]],
    right: Deferrable[Result[U, E]],
    merge: Merge[E] | None = None,
) -> Coroutine[Any, Any, Result[tuple[T, U], E]]:
    """Await left, then right, and combine them with `plus`."""
    _check(None, merge)

    async def _plus() -> Result[tuple[T, U], E]:
        lhs = await settle(left)
        rhs = await settle(right)
        return lhs.plus(rhs, merge)

    return _plus()


def plus_with_async[T, U, R, E](
    left: Deferrable[Result[T, E]],
    right: Deferrable[Result[U, E]],
    func: Callable[[T, U], R] | None = None,
    merge: Merge[E] | None = None,
) -> Coroutine[Any, Any, Result[R, E]]:
    """Await left, then right, and combine them with `plus_with`."""
    _check(func, merge)

    async def _plus_with() -> Result[R, E]:
        lhs = await settle(left)
        rhs = await settle(right)
        return lhs.plus_with(rhs, func, merge)

    return _plus_with()


def fold_async[T, A, E](
    results: Iterable[Deferrable[Result[T, E]]] | AsyncIterable[Deferrable[Result[T, E]]],
    seed: A | Result[A, E],
    func: Callable[[A, T], A],
    *,
    merge: Merge[E] | None = None,
) -> Coroutine[Any, Any, Result[A, E]]:
    """Async form of fold; items may be results or awaitables of results.

    Items are awaited one at a time, in order.
    """
    require(func, 'func')
    _check(None, merge)

    async def _fold() -> Result[A, E]:
        acc = _seeded(seed)
        async with acursor(results) as items:
            async for item in items:
                acc = acc.plus_with(await settle(item), func, merge)
        return acc

    return _fold()


def aggregate_async[T, E](
    results: Iterable[Deferrable[Result[T, E]]] | AsyncIterable[Deferrable[Result[T, E]]],
    func: Callable[[T, T], T] | None = None,
    *,
    merge: Merge[E] | None = None,
) -> Coroutine[Any, Any, Result[T, E]]:
    """Async form of aggregate."""
    _check(func, merge)

    async def _aggregate() -> Result[T, E]:
        async with acursor(results) as items:
            first = await anext(items, _EMPTY)
            if first is _EMPTY:
                raise EmptySequenceError('aggregate_async')
            acc = await settle(first)
            async for item in items:
                acc = acc.plus_with(await settle(item), func, merge)
        return acc

    return _aggregate()


def unroll_async[T, E](
    results: Iterable[Deferrable[Result[T, E]]] | AsyncIterable[Deferrable[Result[T, E]]],
    *,
    merge: Merge[E] | None = None,
) -> Coroutine[Any, Any, Result[list[T], E]]:
    """Async form of unroll."""
    return fold_async(results, [], _append, merge=merge)
