"""Exceptions for misuse of the combinator algebra.

Domain failures travel in-band as `Fail` / `Nothing` and are never raised.
The exceptions here signal defects in the calling code.
"""

from __future__ import annotations

__all__ = [
    'ArgumentError',
    'EmptySequenceError',
]


class ArgumentError(TypeError):
    """A combinator received a missing or non-callable function argument."""

    def __init__(self, argument: str, value: object = None) -> None:
        self.argument = argument
        self.value = value
        if value is None:
            message = f"Argument '{argument}' is required"
        else:
            message = f"Argument '{argument}' must be callable, got {type(value).__name__}"
        super().__init__(message)


class EmptySequenceError(ValueError):
    """A seedless fold was applied to a sequence with no elements."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f'{operation}() of empty sequence with no seed')
