"""Result type: Ok[T] | Fail[E] for explicit error handling.

Two ways to chain results:

- `bind` / `map` short-circuit: the first Fail is passed through unchanged
  and later functions are never called.
- `plus` / `plus_with` accumulate: both operands are already evaluated, and
  when both failed their errors are merged, left first.

The default error type is `Messages`, an ordered tuple of strings. Messages
concatenate through the `combine` typeclass, so `Result[T]` values accumulate
errors without an explicit merge function.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from switchyard._internal.deferred import resolved
from switchyard.assertions import require
from switchyard.typeclass.combine import combine
from switchyard.types.unit import Unit, UnitType

if TYPE_CHECKING:
    from switchyard.types.option import NothingType, Some

__all__ = ['Fail', 'Messages', 'Ok', 'Result', 'fail', 'fail_with', 'ok']


def _identity[T](value: T) -> T:
    return value


def _merger[E](merge: Callable[[E, E], E] | None) -> Callable[[E, E], E]:
    return combine if merge is None else require(merge, 'merge')


def _combiner[T, U, R](func: Callable[[T, U], R] | None) -> Callable[[T, U], R]:
    return combine if func is None else require(func, 'func')


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(2).bind(lambda x: Ok(x * 10))
        Ok(value=20)
        >>> Ok(1).plus(Ok('a'))
        Ok(value=(1, 'a'))
        >>> Ok(3).map2(str, len)
        Ok(value='3')
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_fail(self) -> TypeIs[Fail[Any]]:
        """Return False since this is Ok."""
        return False

    def match[R](self, on_ok: Callable[[T], R], on_fail: Callable[[Any], R]) -> R:
        """Dispatch to on_ok with the contained value.

        Args:
            on_ok: Called with the value when this is Ok.
            on_fail: Called with the error when this is Fail.

        Returns:
            Whatever the selected handler returns.
        """
        require(on_ok, 'on_ok')
        require(on_fail, 'on_fail')
        return on_ok(self.value)

    def switch(self, on_ok: Callable[[T], object], on_fail: Callable[[Any], object]) -> None:
        """Run on_ok with the contained value for its side effect."""
        require(on_ok, 'on_ok')
        require(on_fail, 'on_fail')
        on_ok(self.value)

    def bind[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a computation that may fail.

        Also serves VoidResult chains: f may return a VoidResult or a
        value-bearing Result.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f, not re-wrapped.
        """
        require(f, 'f')
        return f(self.value)

    def bind_async[U, E](self, f: Callable[[T], Awaitable[Result[U, E]]]) -> Awaitable[Result[U, E]]:
        """Chain an async computation that may fail."""
        require(f, 'f')
        return f(self.value)

    def map2[U, F](self, f: Callable[[T], U], error_f: Callable[[Any], F]) -> Ok[U]:
        """Transform whichever branch is held: the value with f, the error with error_f.

        Args:
            f: Applied to the value of an Ok.
            error_f: Applied to the error of a Fail.

        Returns:
            Ok(f(value)).
        """
        require(f, 'f')
        require(error_f, 'error_f')
        return Ok(f(self.value))

    def map2_async[U, F](
        self, f: Callable[[T], Awaitable[U]], error_f: Callable[[Any], Awaitable[F]]
    ) -> Coroutine[Any, Any, Result[U, F]]:
        """Async form of map2."""
        require(f, 'f')
        require(error_f, 'error_f')

        async def _mapped() -> Result[U, F]:
            return Ok(await f(self.value))

        return _mapped()

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value."""
        return self.map2(f, _identity)

    def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> Coroutine[Any, Any, Result[U, Any]]:
        """Await an async function on the contained value and wrap the result in Ok."""
        return self.map2_async(f, resolved)

    def map_error(self, error_f: Callable[[Any], Any]) -> Ok[T]:
        """Keep the value unchanged since this is Ok."""
        return self.map2(_identity, error_f)

    def map_error_async(self, error_f: Callable[[Any], Awaitable[Any]]) -> Awaitable[Ok[T]]:
        """Return an already-resolved self without calling error_f."""
        require(error_f, 'error_f')
        return resolved(self)

    def map_to[U](self, value: U) -> Ok[U]:
        """Replace the contained value with value.

        Turns a VoidResult success into a value-bearing one.
        """
        return Ok(value)

    def map_to_async[U](self, value: Awaitable[U]) -> Coroutine[Any, Any, Ok[U]]:
        """Replace the contained value with the awaited value."""

        async def _mapped() -> Ok[U]:
            return Ok(await value)

        return _mapped()

    def tee(self, f: Callable[[T], object]) -> Ok[T]:
        """Call f with the contained value for its side effect and return self."""
        require(f, 'f')
        f(self.value)
        return self

    def tee_async(self, f: Callable[[T], Awaitable[object]]) -> Coroutine[Any, Any, Ok[T]]:
        """Await f with the contained value for its side effect, then yield self."""
        require(f, 'f')

        async def _teed() -> Ok[T]:
            await f(self.value)
            return self

        return _teed()

    def tee_error(self, error_f: Callable[[Any], object]) -> Ok[T]:
        """Return self without calling error_f."""
        require(error_f, 'error_f')
        return self

    def tee_error_async(self, error_f: Callable[[Any], Awaitable[object]]) -> Awaitable[Ok[T]]:
        """Return an already-resolved self without calling error_f."""
        require(error_f, 'error_f')
        return resolved(self)

    def flatten[U, E](self: Ok[Result[U, E]]) -> Result[U, E]:
        """Collapse Result[Result[U, E], E] into Result[U, E]."""
        return self.value

    def plus[U, E](self, other: Result[U, E], merge: Callable[[E, E], E] | None = None) -> Result[tuple[T, U], E]:
        """Pair this value with other's, or pass other's error through.

        Args:
            other: The right-hand result.
            merge: Combines two errors. Defaults to the `combine` typeclass.

        Returns:
            Ok((self.value, other.value)) if other is Ok, else other's Fail.
        """
        _merger(merge)
        if isinstance(other, Ok):
            return Ok((self.value, other.value))
        return other

    def plus_with[U, R, E](
        self,
        other: Result[U, E],
        func: Callable[[T, U], R] | None = None,
        merge: Callable[[E, E], E] | None = None,
    ) -> Result[R, E]:
        """Like plus, but combine the two values with func instead of pairing them.

        Args:
            other: The right-hand result.
            func: Combines the two values. Defaults to the `combine` typeclass.
            merge: Combines two errors. Defaults to the `combine` typeclass.
        """
        values = _combiner(func)
        return self.plus(other, merge).map(lambda pair: values(*pair))

    def to_option(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from switchyard.types.option import Some

        return Some(self.value)

    def to_void(self) -> Ok[UnitType]:
        """Discard the value, keeping only success."""
        return Ok(Unit)

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, error_f: Callable[[Any], T]) -> T:
        """Return the contained value without calling error_f."""
        require(error_f, 'error_f')
        return self.value

    def unwrap_error(self) -> NoReturn:
        """Raise RuntimeError since Ok has no error."""
        raise RuntimeError(f'Called unwrap_error on Ok: {self.value!r}')


class Fail[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing an error of type E.

    Examples:
        >>> Fail('boom').map(lambda x: x * 2)
        Fail(error='boom')
        >>> Fail(('a',)).plus(Fail(('b',)))
        Fail(error=('a', 'b'))
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Fail."""
        return False

    def is_fail(self) -> TypeIs[Fail[E]]:
        """Return True since this is Fail."""
        return True

    def match[R](self, on_ok: Callable[[Any], R], on_fail: Callable[[E], R]) -> R:
        """Dispatch to on_fail with the contained error."""
        require(on_ok, 'on_ok')
        require(on_fail, 'on_fail')
        return on_fail(self.error)

    def switch(self, on_ok: Callable[[Any], object], on_fail: Callable[[E], object]) -> None:
        """Run on_fail with the contained error for its side effect."""
        require(on_ok, 'on_ok')
        require(on_fail, 'on_fail')
        on_fail(self.error)

    def bind(self, f: Callable[[Any], Any]) -> Fail[E]:
        """Return self without calling f: the first failure wins."""
        require(f, 'f')
        return self

    def bind_async(self, f: Callable[[Any], Any]) -> Awaitable[Fail[E]]:
        """Return an already-resolved self without calling f."""
        require(f, 'f')
        return resolved(self)

    def map2[F](self, f: Callable[[Any], Any], error_f: Callable[[E], F]) -> Fail[F]:
        """Transform the error with error_f; f is not called."""
        require(f, 'f')
        require(error_f, 'error_f')
        return Fail(error_f(self.error))

    def map2_async[F](
        self, f: Callable[[Any], Awaitable[Any]], error_f: Callable[[E], Awaitable[F]]
    ) -> Coroutine[Any, Any, Fail[F]]:
        """Async form of map2."""
        require(f, 'f')
        require(error_f, 'error_f')

        async def _mapped() -> Fail[F]:
            return Fail(await error_f(self.error))

        return _mapped()

    def map(self, f: Callable[[Any], Any]) -> Fail[E]:
        """Return self unchanged since this is Fail."""
        return self.map2(f, _identity)

    def map_async(self, f: Callable[[Any], Awaitable[Any]]) -> Coroutine[Any, Any, Fail[E]]:
        """Resolve to self unchanged since this is Fail."""
        return self.map2_async(f, resolved)

    def map_error[F](self, error_f: Callable[[E], F]) -> Fail[F]:
        """Transform the contained error."""
        return self.map2(_identity, error_f)

    def map_error_async[F](self, error_f: Callable[[E], Awaitable[F]]) -> Coroutine[Any, Any, Fail[F]]:
        """Transform the contained error with an async function."""
        return self.map2_async(resolved, error_f)

    def map_to(self, _value: object) -> Fail[E]:
        """Return self unchanged since this is Fail."""
        return self

    def map_to_async(self, value: Awaitable[object]) -> Coroutine[Any, Any, Fail[E]]:
        """Await value, then return self unchanged since this is Fail."""

        async def _kept() -> Fail[E]:
            await value
            return self

        return _kept()

    def tee(self, f: Callable[[Any], object]) -> Fail[E]:
        """Return self without calling f."""
        require(f, 'f')
        return self

    def tee_async(self, f: Callable[[Any], Awaitable[object]]) -> Awaitable[Fail[E]]:
        """Return an already-resolved self without calling f."""
        require(f, 'f')
        return resolved(self)

    def tee_error(self, error_f: Callable[[E], object]) -> Fail[E]:
        """Call error_f with the contained error for its side effect and return self."""
        require(error_f, 'error_f')
        error_f(self.error)
        return self

    def tee_error_async(self, error_f: Callable[[E], Awaitable[object]]) -> Coroutine[Any, Any, Fail[E]]:
        """Await error_f with the contained error for its side effect, then yield self."""
        require(error_f, 'error_f')

        async def _teed() -> Fail[E]:
            await error_f(self.error)
            return self

        return _teed()

    def flatten(self) -> Fail[E]:
        """Return self since this is Fail (nothing to flatten)."""
        return self

    def plus(self, other: Result[Any, E], merge: Callable[[E, E], E] | None = None) -> Fail[E]:
        """Keep this error, merged with other's when other also failed.

        Args:
            other: The right-hand result.
            merge: Combines two errors, left first. Defaults to the `combine` typeclass.

        Returns:
            self if other is Ok, else Fail(merge(self.error, other.error)).
        """
        merge_errors = _merger(merge)
        if isinstance(other, Ok):
            return self
        return Fail(merge_errors(self.error, other.error))

    def plus_with(
        self,
        other: Result[Any, E],
        func: Callable[[Any, Any], Any] | None = None,
        merge: Callable[[E, E], E] | None = None,
    ) -> Fail[E]:
        """Like plus; func is checked but never called."""
        _combiner(func)
        return self.plus(other, merge)

    def to_option(self) -> NothingType:
        """Convert to Option, returning Nothing."""
        from switchyard.types.option import Nothing

        return Nothing

    def to_void(self) -> Fail[E]:
        """Return self unchanged since this is Fail."""
        return self

    def unwrap(self) -> NoReturn:
        """Raise RuntimeError since Fail has no value to unwrap."""
        raise RuntimeError(f'Called unwrap on Fail: {self.error!r}')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Fail."""
        return default

    def unwrap_or_else[T](self, error_f: Callable[[E], T]) -> T:
        """Compute a value from the contained error."""
        require(error_f, 'error_f')
        return error_f(self.error)

    def unwrap_error(self) -> E:
        """Return the contained error."""
        return self.error


type Messages = tuple[str, ...]
"""Error payload of the string-message specialization `Result[T]`."""

type Result[T, E = Messages] = Ok[T] | Fail[E]


def ok[T](value: T) -> Ok[T]:
    """Wrap a success value."""
    return Ok(value)


def fail[E](error: E) -> Fail[E]:
    """Wrap an error value as is."""
    return Fail(error)


def fail_with(*messages: str | Iterable[str]) -> Fail[Messages]:
    """Build a string-message failure.

    Accepts messages as separate arguments, as iterables of strings, or a mix.

    Examples:
        >>> fail_with('missing name', 'bad age')
        Fail(error=('missing name', 'bad age'))
        >>> fail_with(['a', 'b'])
        Fail(error=('a', 'b'))
    """
    collected: list[str] = []
    for message in messages:
        if isinstance(message, str):
            collected.append(message)
        else:
            collected.extend(message)
    return Fail(tuple(collected))
