"""Typeclass utilities and the combinable capability."""

from switchyard.typeclass.combine import Combinable, combine
from switchyard.typeclass.core import NoInstanceError, TypeClass, typeclass

__all__ = [
    'Combinable',
    'NoInstanceError',
    'TypeClass',
    'combine',
    'typeclass',
]
