"""VoidResult: success without a value, or an error.

A VoidResult is exactly a `Result[UnitType, E]`, so every Result combinator
applies and conversion in either direction is the identity. Use it for
side-effecting steps whose success carries no information.

Example:
    ```python
    def save(user: User) -> VoidResult:
        if not user.name:
            return void_fail('name is required')
        store.put(user)
        return void()

    save(user).map_to(user.id)  # Ok(user.id) or the failure
    ```
"""

from __future__ import annotations

from collections.abc import Iterable

from switchyard.types.result import Fail, Messages, Ok, Result, fail_with
from switchyard.types.unit import Unit, UnitType

__all__ = ['VoidResult', 'void', 'void_fail']


type VoidResult[E = Messages] = Result[UnitType, E]


def void() -> Ok[UnitType]:
    """Return the successful VoidResult, Ok(Unit)."""
    return Ok(Unit)


def void_fail(*messages: str | Iterable[str]) -> Fail[Messages]:
    """Build a failed VoidResult from string messages."""
    return fail_with(*messages)
