"""Scoped single-pass cursors for the fold and reduce family.

A fold acquires exactly one iterator over its input and holds it for the
duration of the fold. The iterator is closed on every exit path: normal
completion, early termination, or a propagated exception. Closing matters for
generators, which otherwise keep their frames (and any `finally` blocks)
suspended until garbage collection.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Generator, Iterable, Iterator
from contextlib import asynccontextmanager, contextmanager
from typing import Any

__all__ = ['acursor', 'cursor']


@contextmanager
def cursor[T](values: Iterable[T]) -> Generator[Iterator[T]]:
    """Acquire an iterator over values and close it on exit."""
    iterator = iter(values)
    try:
        yield iterator
    finally:
        close = getattr(iterator, 'close', None)
        if close is not None:
            close()


async def _drain[T](iterator: Iterator[T]) -> AsyncIterator[T]:
    for item in iterator:
        yield item


@asynccontextmanager
async def acursor[T](values: Iterable[T] | AsyncIterable[T]) -> AsyncIterator[AsyncIterator[T]]:
    """Acquire an async iterator over a sync or async iterable and close it on exit."""
    if isinstance(values, AsyncIterable):
        iterator: Any = aiter(values)
        try:
            yield iterator
        finally:
            aclose = getattr(iterator, 'aclose', None)
            if aclose is not None:
                await aclose()
        return

    with cursor(values) as sync_iterator:
        drained = _drain(sync_iterator)
        try:
            yield drained
        finally:
            await drained.aclose()
