"""
calc-spine - arithmetic expression evaluation service.

A thin service around a pure expression engine:
- calc_spine.expression: tokenizer, shunting-yard parser, postfix evaluator
- calc_spine.core: errors, Result envelope, logging
- calc_spine.api: FastAPI application (POST /api/v1/calculate)
- calc_spine.cli: typer CLI (serve, eval, postfix)
"""

__version__ = "0.1.0"

from calc_spine.core.errors import CalcError, ErrorKind
from calc_spine.core.result import Err, Ok, Result
from calc_spine.expression import evaluate, format_number, to_postfix

__all__ = [
    "CalcError",
    "Err",
    "ErrorKind",
    "Ok",
    "Result",
    "__version__",
    "evaluate",
    "format_number",
    "to_postfix",
]
