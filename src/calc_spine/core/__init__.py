"""
calc-spine core primitives.

- errors: ErrorKind, ErrorCategory and the CalcError hierarchy
- result: Ok / Err / Result envelope
- logging: structlog configuration and context binding
"""

from calc_spine.core.errors import CalcError, ErrorCategory, ErrorKind
from calc_spine.core.result import Err, Ok, Result

__all__ = [
    "CalcError",
    "Err",
    "ErrorCategory",
    "ErrorKind",
    "Ok",
    "Result",
]
