"""Carry a synchronous combinator across a deferred boundary.

Every deferred-self method of AsyncResult and AsyncOption is the matching
synchronous method run through `lift`: await the container, apply the step,
and await the step's outcome too when the step itself was async. The
settle_* helpers go the other way, pulling an awaitable out of a container
and putting its value back in.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine
from typing import Any

from switchyard._internal.deferred import settle
from switchyard.types.option import Option, Some
from switchyard.types.result import Fail, Ok, Result

__all__ = ['apply', 'lift', 'settle_error', 'settle_option', 'settle_result']


def lift[C, R](step: Callable[[C], R | Awaitable[R]]) -> Callable[[Awaitable[C]], Coroutine[Any, Any, R]]:
    """Turn a step over a container into a step over an awaitable container.

    Args:
        step: A synchronous combinator, typically a bound method call such as
            `lambda result: result.map(f)`. It may return an awaitable.

    Returns:
        An async function taking the awaitable container.

    Example:
        ```python
        double = lift(lambda result: result.map(lambda x: x * 2))
        await double(AsyncResult.from_ok(4))
        # Ok(value=8)
        ```
    """

    async def lifted(deferred: Awaitable[C]) -> R:
        return await settle(step(await deferred))

    return lifted


def apply[C, R](step: Callable[[C], R]) -> Callable[[Awaitable[C]], Coroutine[Any, Any, R]]:
    """Like lift, but the step's outcome is returned as is, even when awaitable.

    Used where the outcome is a user value (unwrap_or, fold) that must not
    be awaited on the caller's behalf.
    """

    async def applied(deferred: Awaitable[C]) -> R:
        return step(await deferred)

    return applied


async def settle_option[T](option: Option[Awaitable[T]]) -> Option[T]:
    """Await the value inside a Some; Nothing stays Nothing."""
    if isinstance(option, Some):
        return Some(await option.value)
    return option


async def settle_result[T, E](result: Result[Awaitable[T], E]) -> Result[T, E]:
    """Await the value inside an Ok; a Fail passes through."""
    if isinstance(result, Ok):
        return Ok(await result.value)
    return result


async def settle_error[T, E](result: Result[T, Awaitable[E]]) -> Result[T, E]:
    """Await the error inside a Fail; an Ok passes through."""
    if isinstance(result, Fail):
        return Fail(await result.error)
    return result
