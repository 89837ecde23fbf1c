"""switchyard: railway-oriented Option, Result and VoidResult for Python 3.13+.

Flat imports (preferred):
    from switchyard import Result, Ok, Fail, Option, Some, Nothing
    from switchyard import AsyncResult, AsyncOption, combine

Submodule imports (for organization):
    from switchyard.types import Ok, Fail, Result
    from switchyard.seq import options, results
    from switchyard.async_ import lift
"""

# Configuration and logging
from switchyard._config import SwitchyardConfig, get_config, init
from switchyard._logging import configure_logging, get_logger

# Assertions
from switchyard.assertions import require

# Async
from switchyard.async_ import AsyncOption, AsyncResult, lift, settle_error, settle_option, settle_result

# Errors
from switchyard.errors import ArgumentError, EmptySequenceError

# Sequences
from switchyard.seq import options, results

# Typeclass
from switchyard.typeclass import Combinable, NoInstanceError, combine, typeclass

# Types
from switchyard.types import (
    Fail,
    Messages,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    Unit,
    UnitType,
    VoidResult,
    fail,
    fail_with,
    none,
    ok,
    some,
    to_option,
    void,
    void_fail,
)

__all__ = [
    'ArgumentError',
    'AsyncOption',
    'AsyncResult',
    'Combinable',
    'EmptySequenceError',
    'Fail',
    'Messages',
    'NoInstanceError',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'SwitchyardConfig',
    'Unit',
    'UnitType',
    'VoidResult',
    'combine',
    'configure_logging',
    'fail',
    'fail_with',
    'get_config',
    'get_logger',
    'init',
    'lift',
    'none',
    'ok',
    'options',
    'require',
    'results',
    'settle_error',
    'settle_option',
    'settle_result',
    'some',
    'to_option',
    'typeclass',
    'void',
    'void_fail',
]

__version__ = '0.1.0'
