"""Core types: Option, Result, VoidResult and Unit."""

from switchyard.types.option import Nothing, NothingType, Option, Some, none, some, to_option
from switchyard.types.result import Fail, Messages, Ok, Result, fail, fail_with, ok
from switchyard.types.unit import Unit, UnitType
from switchyard.types.void import VoidResult, void, void_fail

__all__ = [
    'Fail',
    'Messages',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'Unit',
    'UnitType',
    'VoidResult',
    'fail',
    'fail_with',
    'none',
    'ok',
    'some',
    'to_option',
    'void',
    'void_fail',
]
