"""
Query endpoints: POST /query and POST /operation.

Both run one statement through the SQL executor. The executor is sync/blocking;
it runs in a thread so the event loop keeps accepting concurrent requests.
"""

import asyncio
import logging
import traceback
from typing import Any

from fastapi import APIRouter
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from oraclequery.core.config import settings
from oraclequery.core.errors import ExecutionError, ValidationError
from oraclequery.engines.sql import run_operation
from oraclequery.schemas import OperationBody

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["query"])


def _validation_error(exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


def _execution_error(exc: ExecutionError) -> JSONResponse:
    """500 envelope with everything needed to reproduce the statement."""
    ctx = exc.context
    if settings.EXPOSE_ERROR_DETAILS:
        details = "".join(traceback.format_exception(exc))
    else:
        details = type(exc).__name__
    body: dict[str, Any] = {
        "success": False,
        "debugSql": ctx.debug_sql,
        "originalSql": ctx.original_sql,
        "bindParams": ctx.original_parameters,
        "error": ctx.message,
        "details": details,
    }
    return JSONResponse(status_code=500, content=jsonable_encoder(body))


async def _run(body: OperationBody, sql: str | None, sql_field: str) -> JSONResponse:
    try:
        result = await asyncio.to_thread(
            run_operation,
            body.user,
            body.password,
            body.connect_string,
            sql,
            body.params,
            sql_field=sql_field,
        )
    except ValidationError as e:
        return _validation_error(e)
    except ExecutionError as e:
        return _execution_error(e)

    data = result.model_dump(by_alias=True)
    return JSONResponse(content=jsonable_encoder({"success": True, "data": data}))


@router.post("/query")
async def query(body: OperationBody) -> JSONResponse:
    """Run the statement given in ``query`` (``sql`` also accepted)."""
    return await _run(body, body.query or body.sql, "query")


@router.post("/operation")
async def operation(body: OperationBody) -> JSONResponse:
    """Run any statement: SELECT returns rows, DML returns the affected row count."""
    return await _run(body, body.statement, "sql")
