"""@typeclass decorator and dispatch mechanism.

A typeclass is a function whose implementation is chosen by the type of its
first argument. Instances are registered per type; lookup walks the MRO so a
subclass inherits its base's instance. When nothing matches, the decorated
function's own body (if it has one) is the fallback.
"""

from __future__ import annotations

import dis
from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['NoInstanceError', 'TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])


class NoInstanceError(TypeError):
    """Raised when no typeclass instance is registered for a type."""

    def __init__(self, typeclass_name: str, value_type: type) -> None:
        self.typeclass_name = typeclass_name
        self.value_type = value_type
        super().__init__(f"No instance of '{typeclass_name}' for type '{value_type.__name__}'")


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A polymorphic function with per-type instances.

    The proxy keeps the wrapped function's name, docstring and signature, so
    a typeclass can stand wherever the plain function could.

    Example:
        ```python
        @typeclass
        def describe(value) -> str: ...

        @describe.instance(int)
        def _describe_int(value: int) -> str:
            return f'int {value}'

        describe(3)
        # 'int 3'
        ```
    """

    def __init__(self, default_fn: F) -> None:
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_default: F | None = default_fn if _has_implementation(default_fn) else None
        self._self_instances: dict[type, Callable[..., Any]] = {}

    def instance(self, *types: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an implementation for one or more types.

        Args:
            *types: The types the implementation handles.

        Returns:
            A decorator that registers the implementation and returns it unchanged.
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            for type_ in types:
                self._self_instances[type_] = fn
            return fn

        return decorator

    def dispatch(self, value_type: type) -> Callable[..., Any] | None:
        """Return the instance registered for value_type or its nearest base."""
        for base in value_type.__mro__:
            if base in self._self_instances:
                return self._self_instances[base]
        return None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one argument')

        instance_fn = self.dispatch(type(args[0]))
        if instance_fn is not None:
            return instance_fn(*args, **kwargs)

        if self._self_default is not None:
            return self._self_default(*args, **kwargs)

        raise NoInstanceError(self._self_name, type(args[0]))

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


_STUB_OPS = frozenset({'RESUME', 'NOP', 'RETURN_VALUE'})
_CONST_OPS = frozenset({'LOAD_CONST', 'RETURN_CONST'})


def _has_implementation(fn: Callable[..., Any]) -> bool:
    """Check whether fn has a body beyond `...`, `pass` or a docstring.

    A stub only ever returns None, so any other instruction or constant
    counts as an implementation.
    """
    code = getattr(fn, '__code__', None)
    if code is None:
        return True  # Built-in or C extension
    for ins in dis.get_instructions(code):
        if ins.opname in _CONST_OPS:
            if ins.argval is not None:
                return True
        elif ins.opname not in _STUB_OPS:
            return True
    return False


def typeclass(fn: F) -> TypeClass[F]:
    """Create a typeclass from a function signature.

    Args:
        fn: The function defining the typeclass. Its body, if any, is the
            fallback used when no instance matches.

    Returns:
        A TypeClass that dispatches on the type of its first argument.
    """
    return TypeClass(fn)
