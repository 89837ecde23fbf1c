"""Argument guard used by every combinator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from switchyard.errors import ArgumentError

__all__ = ['require']


def require[F: Callable[..., Any]](fn: F | None, name: str) -> F:
    """Return `fn` if it is callable, otherwise raise ArgumentError.

    Combinators call this before looking at which variant they hold, so a
    bad argument is reported for `Ok` and `Fail` (or `Some` and `Nothing`)
    alike.

    Args:
        fn: The function argument to check.
        name: Parameter name reported in the error.

    Returns:
        The same function, for inline use.

    Raises:
        ArgumentError: If fn is None or not callable.

    Example:
        ```python
        require(len, 'f')
        # <built-in function len>
        require(None, 'f')
        # ArgumentError: Argument 'f' is required
        ```
    """
    if fn is None or not callable(fn):
        raise ArgumentError(name, fn)
    return fn

