"""Deferred Option and Result: the combinator algebra over awaitables."""

from switchyard.async_.lift import apply, lift, settle_error, settle_option, settle_result
from switchyard.async_.option import AsyncOption
from switchyard.async_.result import AsyncResult

__all__ = [
    'AsyncOption',
    'AsyncResult',
    'apply',
    'lift',
    'settle_error',
    'settle_option',
    'settle_result',
]
