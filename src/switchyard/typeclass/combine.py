"""The combinable capability: how two values of one type merge into one.

`plus`, `plus_with` and the result folds use `combine` whenever the caller
does not pass an explicit merge or combining function. Sequences
concatenate, so the default `Messages` error of `Result[T]` accumulates
without any extra argument:

    >>> combine(('a',), ('b',))
    ('a', 'b')

User types opt in by implementing `Combinable`:

    >>> class Total(msgspec.Struct, frozen=True):
    ...     amount: int
    ...     def combine(self, other: Total) -> Total:
    ...         return Total(self.amount + other.amount)
    >>> combine(Total(1), Total(2))
    Total(amount=3)
"""

from __future__ import annotations

from typing import Any, Protocol, Self, runtime_checkable

from switchyard.typeclass.core import NoInstanceError, typeclass

__all__ = ['Combinable', 'combine']


@runtime_checkable
class Combinable(Protocol):
    """A type that declares how two of its values combine."""

    def combine(self, other: Self) -> Self: ...


@typeclass
def combine(left: Any, right: Any) -> Any:
    """Combine two values of the same type into one.

    Raises:
        NoInstanceError: If the type has no registered instance and is not Combinable.
    """
    if isinstance(left, Combinable):
        return left.combine(right)
    raise NoInstanceError('combine', type(left))


@combine.instance(tuple, list, str)
def _concatenate(left: Any, right: Any) -> Any:
    # A subclass declaring its own combine (a NamedTuple error, say) wins.
    if isinstance(left, Combinable):
        return left.combine(right)
    return left + right


@combine.instance(frozenset)
def _union(left: frozenset[Any], right: frozenset[Any]) -> frozenset[Any]:
    if isinstance(left, Combinable):
        return left.combine(right)
    return left | right
