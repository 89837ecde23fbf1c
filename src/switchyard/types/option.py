"""Option type: Some[T] | Nothing for values that may be absent."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from switchyard._internal.deferred import resolved
from switchyard.assertions import require

if TYPE_CHECKING:
    from switchyard.types.result import Fail, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'none', 'some', 'to_option']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Every combinator checks its function arguments before dispatching, so
    `Some(1).map(None)` and `Nothing.map(None)` both raise ArgumentError.

    Examples:
        >>> Some(21).map(lambda x: x * 2)
        Some(value=42)
        >>> Some(4).bind(lambda x: Some(x) if x > 3 else Nothing)
        Some(value=4)
        >>> Some('a').match(str.upper, lambda: '-')
        'A'
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def match[R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        """Dispatch to on_some with the contained value.

        Args:
            on_some: Called with the value when this is Some.
            on_none: Called with no arguments when this is Nothing.

        Returns:
            Whatever the selected handler returns.
        """
        require(on_some, 'on_some')
        require(on_none, 'on_none')
        return on_some(self.value)

    def switch(self, on_some: Callable[[T], object], on_none: Callable[[], object]) -> None:
        """Run on_some with the contained value for its side effect."""
        require(on_some, 'on_some')
        require(on_none, 'on_none')
        on_some(self.value)

    def bind[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f, not re-wrapped.
        """
        require(f, 'f')
        return f(self.value)

    def bind_async[U](self, f: Callable[[T], Awaitable[Option[U]]]) -> Awaitable[Option[U]]:
        """Apply an async function that returns an Option to the contained value."""
        require(f, 'f')
        return f(self.value)

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value and wrap the result in Some."""
        require(f, 'f')
        return Some(f(self.value))

    def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> Coroutine[Any, Any, Option[U]]:
        """Await an async function on the contained value and wrap the result in Some."""
        require(f, 'f')

        async def _mapped() -> Option[U]:
            return Some(await f(self.value))

        return _mapped()

    def tee(self, f: Callable[[T], object]) -> Some[T]:
        """Call f with the contained value for its side effect and return self."""
        require(f, 'f')
        f(self.value)
        return self

    def tee_async(self, f: Callable[[T], Awaitable[object]]) -> Coroutine[Any, Any, Option[T]]:
        """Await f with the contained value for its side effect, then yield self."""
        require(f, 'f')

        async def _teed() -> Option[T]:
            await f(self.value)
            return self

        return _teed()

    def flatten[U](self: Some[Option[U]]) -> Option[U]:
        """Collapse Option[Option[U]] into Option[U]."""
        return self.value

    def fold[A](self, seed: A, f: Callable[[A, T], A]) -> A:
        """Combine seed with the contained value."""
        require(f, 'f')
        return f(seed, self.value)

    def fold_async[A](self, seed: A, f: Callable[[A, T], Awaitable[A]]) -> Awaitable[A]:
        """Combine seed with the contained value using an async function."""
        require(f, 'f')
        return f(seed, self.value)

    def fold_until[A](self, seed: A, f: Callable[[A, T], Option[A]]) -> Option[A]:
        """Combine seed with the contained value; f may return Nothing to stop."""
        require(f, 'f')
        return f(seed, self.value)

    def fold_until_async[A](self, seed: A, f: Callable[[A, T], Awaitable[Option[A]]]) -> Awaitable[Option[A]]:
        """Async form of fold_until."""
        require(f, 'f')
        return f(seed, self.value)

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Return the contained value without calling f."""
        require(f, 'f')
        return self.value

    def or_(self, _other: Option[T]) -> Some[T]:
        """Return self since this is Some."""
        return self

    def or_else(self, f: Callable[[], Option[T]]) -> Some[T]:
        """Return self without calling f."""
        require(f, 'f')
        return self

    def to_result[E](self, _error: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from switchyard.types.result import Ok

        return Ok(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly. Function arguments are still validated even
    though they are never called.

    Examples:
        >>> Nothing.map(lambda x: x * 2)
        Nothing
        >>> Nothing.unwrap_or(0)
        0
    """

    def __repr__(self) -> str:
        return 'Nothing'

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def match[R](self, on_some: Callable[[Any], R], on_none: Callable[[], R]) -> R:
        """Dispatch to on_none."""
        require(on_some, 'on_some')
        require(on_none, 'on_none')
        return on_none()

    def switch(self, on_some: Callable[[Any], object], on_none: Callable[[], object]) -> None:
        """Run on_none for its side effect."""
        require(on_some, 'on_some')
        require(on_none, 'on_none')
        on_none()

    def bind(self, f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing without calling f."""
        require(f, 'f')
        return self

    def bind_async(self, f: Callable[[Any], Any]) -> Awaitable[NothingType]:
        """Return an already-resolved Nothing without calling f."""
        require(f, 'f')
        return resolved(self)

    def map(self, f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing without calling f."""
        require(f, 'f')
        return self

    def map_async(self, f: Callable[[Any], Any]) -> Awaitable[NothingType]:
        """Return an already-resolved Nothing without calling f."""
        require(f, 'f')
        return resolved(self)

    def tee(self, f: Callable[[Any], object]) -> NothingType:
        """Return Nothing without calling f."""
        require(f, 'f')
        return self

    def tee_async(self, f: Callable[[Any], Any]) -> Awaitable[NothingType]:
        """Return an already-resolved Nothing without calling f."""
        require(f, 'f')
        return resolved(self)

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def fold[A](self, seed: A, f: Callable[[A, Any], A]) -> A:
        """Return seed unchanged since there is no value to fold in."""
        require(f, 'f')
        return seed

    def fold_async[A](self, seed: A, f: Callable[[A, Any], Awaitable[A]]) -> Awaitable[A]:
        """Return an already-resolved seed."""
        require(f, 'f')
        return resolved(seed)

    def fold_until[A](self, seed: A, f: Callable[[A, Any], Option[A]]) -> Option[A]:
        """Return Some(seed): an absent value does not stop a fold."""
        require(f, 'f')
        return Some(seed)

    def fold_until_async[A](self, seed: A, f: Callable[[A, Any], Awaitable[Option[A]]]) -> Awaitable[Option[A]]:
        """Return an already-resolved Some(seed)."""
        require(f, 'f')
        return resolved(Some(seed))

    def unwrap(self) -> NoReturn:
        """Raise RuntimeError since Nothing has no value to unwrap."""
        raise RuntimeError('Called unwrap on Nothing')

    def expect(self, msg: str) -> NoReturn:
        """Raise RuntimeError with a custom message."""
        raise RuntimeError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        require(f, 'f')
        return f()

    def or_[T](self, other: Option[T]) -> Option[T]:
        """Return other since this is Nothing."""
        return other

    def or_else[T](self, f: Callable[[], Option[T]]) -> Option[T]:
        """Return the Option produced by f."""
        require(f, 'f')
        return f()

    def to_result[E](self, error: E) -> Fail[E]:
        """Convert to Result, returning Fail(error)."""
        from switchyard.types.result import Fail

        return Fail(error)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Some[T]:
    """Wrap a present value. `some(None)` is a present None, not Nothing."""
    return Some(value)


def none() -> NothingType:
    """Return the Nothing singleton."""
    return Nothing


def to_option[T](value: T | None) -> Option[T]:
    """Convert an optional value: None becomes Nothing, anything else Some(value)."""
    if value is None:
        return Nothing
    return Some(value)
