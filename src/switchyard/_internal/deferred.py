"""Helpers for the host's deferred-computation primitive (Awaitable)."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable

__all__ = ['resolved', 'settle']


async def resolved[T](value: T) -> T:
    """Wrap an already-known value as a deferred computation."""
    return value


async def settle[T](value: T | Awaitable[T]) -> T:
    """Await value if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value
