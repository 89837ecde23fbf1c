"""AsyncResult: a deferred Result with the full combinator set.

AsyncResult wraps an Awaitable[Result[T, E]]. Chaining methods return a new
AsyncResult and run nothing until the chain is awaited; terminal methods
(`match`, `switch`, `unwrap_or`, ...) return a coroutine producing a plain
value. Each method applies the synchronous Result method of the same name
once the wrapped result is available, so sync and async chains agree.

Example:
    ```python
    async def load_user(user_id: int) -> Result[User]:
        ...

    greeting = await (
        AsyncResult(load_user(1))
        .bind(validate)
        .map_async(render_profile)
        .map_error(lambda errors: ('load failed', *errors))
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from switchyard._internal.deferred import resolved, settle
from switchyard.assertions import require
from switchyard.async_.lift import apply, lift
from switchyard.types.option import Option
from switchyard.types.result import Fail, Ok, Result
from switchyard.types.unit import UnitType

__all__ = ['AsyncResult']


class AsyncResult[T, E]:
    """Deferred Result for composing async operations that may fail.

    Function arguments are checked when the method is called, not when the
    chain is awaited, so `AsyncResult.from_ok(1).map(None)` raises
    ArgumentError immediately.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncResult
        twice raises RuntimeError. Use from_ok/from_fail/from_result for
        values that need to be awaited more than once.

    Attributes:
        _awaitable: The underlying awaitable that produces a Result.

    Example:
        ```python
        async def main():
            result = await AsyncResult.from_ok(21).map(lambda x: x * 2)
            assert result == Ok(42)

        asyncio.run(main())
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        """Create an AsyncResult from an awaitable.

        Args:
            awaitable: An awaitable that produces a Result[T, E].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        """Support await syntax to get the underlying Result."""
        return self._awaitable.__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult containing Ok(value)."""
        return cls(resolved(Ok(value)))

    @classmethod
    def from_fail(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult containing Fail(error)."""
        return cls(resolved(Fail(error)))

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an AsyncResult from a synchronous Result."""
        return cls(resolved(result))

    def _then[U, F](self, step: Callable[[Result[T, E]], Any]) -> AsyncResult[U, F]:
        return AsyncResult(lift(step)(self._awaitable))

    # --- Chaining ---

    def bind[U](self, f: Callable[[T], Result[U, E]]) -> AsyncResult[U, E]:
        """Chain a computation that may fail; a Fail skips f."""
        require(f, 'f')
        return self._then(lambda result: result.bind(f))

    def bind_async[U](self, f: Callable[[T], Awaitable[Result[U, E]]]) -> AsyncResult[U, E]:
        """Chain an async computation that may fail.

        Args:
            f: Async function taking the Ok value and producing a Result.

        Returns:
            New AsyncResult with f's result, or the original Fail.

        Example:
            ```python
            async def parse(raw: str) -> Result[int]:
                return Ok(int(raw)) if raw.isdigit() else fail_with(f'not a number: {raw}')

            await AsyncResult.from_ok('42').bind_async(parse)
            # Ok(value=42)
            ```
        """
        require(f, 'f')
        return self._then(lambda result: result.bind_async(f))

    def map[U](self, f: Callable[[T], U]) -> AsyncResult[U, E]:
        """Apply a sync function to the Ok value."""
        require(f, 'f')
        return self._then(lambda result: result.map(f))

    def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        """Apply an async function to the Ok value."""
        require(f, 'f')
        return self._then(lambda result: result.map_async(f))

    def map2[U, F](self, f: Callable[[T], U], error_f: Callable[[E], F]) -> AsyncResult[U, F]:
        """Transform the value with f or the error with error_f."""
        require(f, 'f')
        require(error_f, 'error_f')
        return self._then(lambda result: result.map2(f, error_f))

    def map2_async[U, F](
        self, f: Callable[[T], Awaitable[U]], error_f: Callable[[E], Awaitable[F]]
    ) -> AsyncResult[U, F]:
        """Async form of map2."""
        require(f, 'f')
        require(error_f, 'error_f')
        return self._then(lambda result: result.map2_async(f, error_f))

    def map_error[F](self, error_f: Callable[[E], F]) -> AsyncResult[T, F]:
        """Transform the error of a Fail."""
        require(error_f, 'error_f')
        return self._then(lambda result: result.map_error(error_f))

    def map_error_async[F](self, error_f: Callable[[E], Awaitable[F]]) -> AsyncResult[T, F]:
        """Transform the error of a Fail with an async function."""
        require(error_f, 'error_f')
        return self._then(lambda result: result.map_error_async(error_f))

    def map_to[U](self, value: U) -> AsyncResult[U, E]:
        """Replace the Ok value with value."""
        return self._then(lambda result: result.map_to(value))

    def map_to_async[U](self, value: Awaitable[U]) -> AsyncResult[U, E]:
        """Replace the Ok value with the awaited value.

        value is awaited after this result, whichever variant it holds.
        """
        return self._then(lambda result: result.map_to_async(value))

    def tee(self, f: Callable[[T], object]) -> AsyncResult[T, E]:
        """Call f with the Ok value for its side effect."""
        require(f, 'f')
        return self._then(lambda result: result.tee(f))

    def tee_async(self, f: Callable[[T], Awaitable[object]]) -> AsyncResult[T, E]:
        """Await f with the Ok value for its side effect."""
        require(f, 'f')
        return self._then(lambda result: result.tee_async(f))

    def tee_error(self, error_f: Callable[[E], object]) -> AsyncResult[T, E]:
        """Call error_f with the error of a Fail for its side effect."""
        require(error_f, 'error_f')
        return self._then(lambda result: result.tee_error(error_f))

    def tee_error_async(self, error_f: Callable[[E], Awaitable[object]]) -> AsyncResult[T, E]:
        """Await error_f with the error of a Fail for its side effect."""
        require(error_f, 'error_f')
        return self._then(lambda result: result.tee_error_async(error_f))

    def flatten[U](self: AsyncResult[Result[U, E], E]) -> AsyncResult[U, E]:
        """Collapse a deferred Result[Result[U, E], E]."""
        return self._then(lambda result: result.flatten())

    def to_void(self) -> AsyncResult[UnitType, E]:
        """Discard the Ok value, keeping only success."""
        return self._then(lambda result: result.to_void())

    # --- Accumulation ---

    def plus[U](
        self,
        other: Result[U, E] | Awaitable[Result[U, E]],
        merge: Callable[[E, E], E] | None = None,
    ) -> AsyncResult[tuple[T, U], E]:
        """Pair with other's value, merging errors when both failed.

        This result is awaited first, then other.

        Args:
            other: A Result, or an awaitable of one (an AsyncResult works).
            merge: Combines two errors. Defaults to the `combine` typeclass.
        """
        if merge is not None:
            require(merge, 'merge')

        async def _plus() -> Result[tuple[T, U], E]:
            left = await self._awaitable
            right = await settle(other)
            return left.plus(right, merge)

        return AsyncResult(_plus())

    def plus_with[U, R](
        self,
        other: Result[U, E] | Awaitable[Result[U, E]],
        func: Callable[[T, U], R] | None = None,
        merge: Callable[[E, E], E] | None = None,
    ) -> AsyncResult[R, E]:
        """Like plus, but combine the two values with func."""
        if func is not None:
            require(func, 'func')
        if merge is not None:
            require(merge, 'merge')

        async def _plus_with() -> Result[R, E]:
            left = await self._awaitable
            right = await settle(other)
            return left.plus_with(right, func, merge)

        return AsyncResult(_plus_with())

    # --- Terminal ---

    def match[R](
        self, on_ok: Callable[[T], R | Awaitable[R]], on_fail: Callable[[E], R | Awaitable[R]]
    ) -> Coroutine[Any, Any, R]:
        """Dispatch to on_ok or on_fail; async handlers are awaited."""
        require(on_ok, 'on_ok')
        require(on_fail, 'on_fail')
        return lift(lambda result: result.match(on_ok, on_fail))(self._awaitable)

    def switch(
        self, on_ok: Callable[[T], object], on_fail: Callable[[E], object]
    ) -> Coroutine[Any, Any, None]:
        """Run on_ok or on_fail for its side effect; async handlers are awaited."""
        require(on_ok, 'on_ok')
        require(on_fail, 'on_fail')

        async def _switched() -> None:
            await self.match(on_ok, on_fail)

        return _switched()

    def unwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        """Resolve to the Ok value or default."""
        return apply(lambda result: result.unwrap_or(default))(self._awaitable)

    def unwrap_or_else(self, error_f: Callable[[E], T]) -> Coroutine[Any, Any, T]:
        """Resolve to the Ok value or error_f(error)."""
        require(error_f, 'error_f')
        return apply(lambda result: result.unwrap_or_else(error_f))(self._awaitable)

    def to_option(self) -> Coroutine[Any, Any, Option[T]]:
        """Resolve to Some(value) or Nothing."""
        return apply(lambda result: result.to_option())(self._awaitable)
