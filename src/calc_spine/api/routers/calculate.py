"""
Calculate endpoint.

``POST /calculate`` accepts ``{"expression": "<infix>"}`` and answers with the
evaluated value. Input is screened here before it reaches the engine:

- a body that is not a JSON object with a string ``expression`` → 500
  ``Internal server error``; the body is decoded whatever its Content-Type
- empty or whitespace-only expressions → 422 ``Expression is not valid``
- characters outside digits, ``+ - * /``, parentheses, whitespace → 422
- any engine error (division by zero, mismatched parentheses, ...) → 500
  ``Internal server error``; the specific ErrorKind is logged, not returned
- success → 200 ``{"result": "<value>"}``
"""

from __future__ import annotations

import re

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from calc_spine.api.deps import Settings
from calc_spine.api.middleware.errors import error_response
from calc_spine.api.schemas import (
    EXPRESSION_NOT_VALID,
    INTERNAL_SERVER_ERROR,
    CalculateRequest,
    CalculateResponse,
    ErrorResponse,
)
from calc_spine.core.errors import CalcError, ExpressionRejectedError
from calc_spine.core.logging import get_logger
from calc_spine.core.result import Err, Ok, Result, from_bool
from calc_spine.expression import evaluate, format_number

router = APIRouter(tags=["calculate"])
log = get_logger(__name__)

ALLOWED_EXPRESSION = re.compile(r"[0-9+\-*/()\s]+", re.ASCII)


def validate_expression(expression: str) -> Result[str]:
    """Screen raw input before handing it to the engine."""
    return from_bool(
        bool(expression.strip()),
        expression,
        ExpressionRejectedError("expression is empty"),
    ).flat_map(
        lambda expr: from_bool(
            ALLOWED_EXPRESSION.fullmatch(expr) is not None,
            expr,
            ExpressionRejectedError("expression contains unsupported characters"),
        )
    )


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": CalculateRequest.model_json_schema()}},
        }
    },
    responses={
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def calculate(request: Request, settings: Settings) -> JSONResponse:
    """Evaluate an arithmetic expression."""
    try:
        body = CalculateRequest.model_validate_json(await request.body())
    except ValidationError as exc:
        log.warning("request_body_invalid", errors=exc.error_count())
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR)

    match validate_expression(body.expression):
        case Err(error):
            log.info("expression_rejected", reason=str(error))
            return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, EXPRESSION_NOT_VALID)
        case Ok(expression):
            pass

    match evaluate(expression, max_length=settings.max_expression_length):
        case Ok(value):
            result = format_number(value)
            log.info("calculation_succeeded", result=result)
            return JSONResponse(content=CalculateResponse(result=result).model_dump())
        case Err(error):
            details = error.to_dict() if isinstance(error, CalcError) else {"message": str(error)}
            log.warning("calculation_failed", **details)
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR)
