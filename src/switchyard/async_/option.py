"""AsyncOption: a deferred Option with the full combinator set."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from switchyard._internal.deferred import resolved, settle
from switchyard.assertions import require
from switchyard.async_.lift import apply, lift
from switchyard.types.option import Nothing, Option, Some, to_option
from switchyard.types.result import Result

__all__ = ['AsyncOption']


class AsyncOption[T]:
    """Deferred Option for composing async lookups.

    Chaining methods return a new AsyncOption; terminal methods return a
    coroutine. Function arguments are checked at call time.

    Example:
        ```python
        async def find_user(name: str) -> Option[User]:
            ...

        email = await (
            AsyncOption(find_user('ada'))
            .map(lambda user: user.email)
            .or_(Some('unknown@example.com'))
            .unwrap_or('')
        )
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Option[T]]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Option[T]]:
        return self._awaitable.__await__()

    @classmethod
    def from_some(cls, value: T) -> AsyncOption[T]:
        """Create an AsyncOption containing Some(value)."""
        return cls(resolved(Some(value)))

    @classmethod
    def from_option(cls, option: Option[T]) -> AsyncOption[T]:
        """Create an AsyncOption from a synchronous Option."""
        return cls(resolved(option))

    @classmethod
    def nothing(cls) -> AsyncOption[Any]:
        """Create an AsyncOption containing Nothing."""
        return cls(resolved(Nothing))

    @classmethod
    def from_awaitable(cls, awaitable: Awaitable[T]) -> AsyncOption[T]:
        """Wrap the eventual value of awaitable in Some.

        A None result is still present: this is `Some(None)`. Use
        `to_option` to treat None as absent.
        """

        async def _some() -> Option[T]:
            return Some(await awaitable)

        return cls(_some())

    @classmethod
    def to_option(cls, awaitable: Awaitable[T | None]) -> AsyncOption[T]:
        """Wrap the eventual value of awaitable, turning None into Nothing."""

        async def _option() -> Option[T]:
            return to_option(await awaitable)

        return cls(_option())

    def _then[U](self, step: Callable[[Option[T]], Any]) -> AsyncOption[U]:
        return AsyncOption(lift(step)(self._awaitable))

    # --- Chaining ---

    def bind[U](self, f: Callable[[T], Option[U]]) -> AsyncOption[U]:
        """Apply a function returning an Option to the value."""
        require(f, 'f')
        return self._then(lambda option: option.bind(f))

    def bind_async[U](self, f: Callable[[T], Awaitable[Option[U]]]) -> AsyncOption[U]:
        """Apply an async function returning an Option to the value."""
        require(f, 'f')
        return self._then(lambda option: option.bind_async(f))

    def map[U](self, f: Callable[[T], U]) -> AsyncOption[U]:
        """Apply a sync function to the value."""
        require(f, 'f')
        return self._then(lambda option: option.map(f))

    def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncOption[U]:
        """Apply an async function to the value."""
        require(f, 'f')
        return self._then(lambda option: option.map_async(f))

    def tee(self, f: Callable[[T], object]) -> AsyncOption[T]:
        """Call f with the value for its side effect."""
        require(f, 'f')
        return self._then(lambda option: option.tee(f))

    def tee_async(self, f: Callable[[T], Awaitable[object]]) -> AsyncOption[T]:
        """Await f with the value for its side effect."""
        require(f, 'f')
        return self._then(lambda option: option.tee_async(f))

    def flatten[U](self: AsyncOption[Option[U]]) -> AsyncOption[U]:
        """Collapse a deferred Option[Option[U]]."""
        return self._then(lambda option: option.flatten())

    def or_(self, other: Option[T] | Awaitable[Option[T]]) -> AsyncOption[T]:
        """Fall back to other when Nothing.

        An awaitable other is awaited after this option, whichever variant
        this option turns out to be.
        """

        async def _or() -> Option[T]:
            option = await self._awaitable
            return option.or_(await settle(other))

        return AsyncOption(_or())

    def or_else(self, f: Callable[[], Option[T]]) -> AsyncOption[T]:
        """Fall back to f() when Nothing."""
        require(f, 'f')
        return self._then(lambda option: option.or_else(f))

    def or_else_async(self, f: Callable[[], Awaitable[Option[T]]]) -> AsyncOption[T]:
        """Fall back to the awaited f() when Nothing."""
        require(f, 'f')
        return self._then(lambda option: option.or_else(f))

    # --- Terminal ---

    def match[R](
        self, on_some: Callable[[T], R | Awaitable[R]], on_none: Callable[[], R | Awaitable[R]]
    ) -> Coroutine[Any, Any, R]:
        """Dispatch to on_some or on_none; async handlers are awaited."""
        require(on_some, 'on_some')
        require(on_none, 'on_none')
        return lift(lambda option: option.match(on_some, on_none))(self._awaitable)

    def switch(self, on_some: Callable[[T], object], on_none: Callable[[], object]) -> Coroutine[Any, Any, None]:
        """Run on_some or on_none for its side effect; async handlers are awaited."""
        require(on_some, 'on_some')
        require(on_none, 'on_none')

        async def _switched() -> None:
            await self.match(on_some, on_none)

        return _switched()

    def fold[A](self, seed: A, f: Callable[[A, T], A]) -> Coroutine[Any, Any, A]:
        """Resolve to f(seed, value), or seed when Nothing."""
        require(f, 'f')
        return apply(lambda option: option.fold(seed, f))(self._awaitable)

    def fold_async[A](self, seed: A, f: Callable[[A, T], Awaitable[A]]) -> Coroutine[Any, Any, A]:
        """Async form of fold."""
        require(f, 'f')
        return lift(lambda option: option.fold_async(seed, f))(self._awaitable)

    def fold_until[A](self, seed: A, f: Callable[[A, T], Option[A]]) -> Coroutine[Any, Any, Option[A]]:
        """Resolve to f(seed, value), or Some(seed) when Nothing."""
        require(f, 'f')
        return apply(lambda option: option.fold_until(seed, f))(self._awaitable)

    def fold_until_async[A](
        self, seed: A, f: Callable[[A, T], Awaitable[Option[A]]]
    ) -> Coroutine[Any, Any, Option[A]]:
        """Async form of fold_until."""
        require(f, 'f')
        return lift(lambda option: option.fold_until_async(seed, f))(self._awaitable)

    def unwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        """Resolve to the value or default."""
        return apply(lambda option: option.unwrap_or(default))(self._awaitable)

    def unwrap_or_else(self, f: Callable[[], T]) -> Coroutine[Any, Any, T]:
        """Resolve to the value or f()."""
        require(f, 'f')
        return apply(lambda option: option.unwrap_or_else(f))(self._awaitable)

    def unwrap_or_else_async(self, f: Callable[[], Awaitable[T]]) -> Coroutine[Any, Any, T]:
        """Resolve to the value or the awaited f()."""
        require(f, 'f')

        async def _unwrapped() -> T:
            option = await self._awaitable
            if isinstance(option, Some):
                return option.value
            return await f()

        return _unwrapped()

    def to_result[E](self, error: E) -> Coroutine[Any, Any, Result[T, E]]:
        """Resolve to Ok(value) or Fail(error)."""
        return apply(lambda option: option.to_result(error))(self._awaitable)
