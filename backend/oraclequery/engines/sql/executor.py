"""
Execute one statement against Oracle: validate, connect, execute, normalize, close.

Validation and parameter parsing happen before any connection attempt. A
connection that was opened is always closed; a close failure is logged and
never masks the original error.
"""

import json
import logging
from typing import Any

from oraclequery.core.db import close_quietly, connect, execute
from oraclequery.core.errors import (
    DatabaseConnectionError,
    ErrorContext,
    ParameterParseError,
    StatementExecutionError,
    ValidationError,
    required_fields_message,
)
from oraclequery.engines.sql.debug_sql import substitute
from oraclequery.engines.sql.normalizer import normalize, operation_kind
from oraclequery.schemas import ConnectionDescriptor, ExecutionResult, StatementRequest

logger = logging.getLogger(__name__)


def parse_parameters(params: Any) -> dict[str, Any]:
    """Named parameters from a mapping or JSON-object text. None/blank -> {}."""
    if params is None:
        return {}
    if isinstance(params, dict):
        return params
    if not isinstance(params, str):
        raise ParameterParseError(
            f"Parâmetros inválidos: esperado um objeto JSON, recebido {type(params).__name__}"
        )
    if not params.strip():
        return {}
    try:
        parsed = json.loads(params)
    except json.JSONDecodeError as e:
        raise ParameterParseError(f"Parâmetros inválidos (JSON esperado): {e}") from e
    if not isinstance(parsed, dict):
        raise ParameterParseError(
            f"Parâmetros inválidos: esperado um objeto JSON, recebido {type(parsed).__name__}"
        )
    return parsed


def build_request(
    user: str | None,
    password: str | None,
    connect_target: str | None,
    sql: str | None,
    params: dict[str, Any] | str | None = None,
    *,
    sql_field: str = "sql",
) -> tuple[ConnectionDescriptor, StatementRequest]:
    """
    Validate raw inputs. Raises ValidationError / ParameterParseError.

    sql_field is the name the caller used for the statement ("sql" or "query").
    """
    fields = {
        "user": user,
        "password": password,
        "connectString": connect_target,
        sql_field: sql,
    }
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise ValidationError(required_fields_message(sql_field), missing=missing)

    named = parse_parameters(params)
    descriptor = ConnectionDescriptor(
        user=user, password=password, connect_target=connect_target
    )
    return descriptor, StatementRequest(sql=sql, named_parameters=named)


def _error_context(exc: Exception, request: StatementRequest) -> ErrorContext:
    return ErrorContext(
        message=str(exc),
        debug_sql=substitute(request.sql, request.named_parameters),
        original_sql=request.sql,
        original_parameters=request.named_parameters,
    )


def execute_statement(
    descriptor: ConnectionDescriptor, request: StatementRequest
) -> ExecutionResult:
    """
    Run request.sql once on a fresh connection and return the normalized result.

    Raises DatabaseConnectionError when the connection cannot be opened and
    StatementExecutionError when the statement fails.
    """
    kind = operation_kind(request.sql)
    try:
        conn = connect(descriptor.user, descriptor.password, descriptor.connect_target)
    except Exception as e:
        raise DatabaseConnectionError(_error_context(e, request)) from e

    try:
        cur = execute(conn, request.sql, request.named_parameters)
        return normalize(kind, cur)
    except Exception as e:
        logger.info("%s statement failed: %s", kind or "<empty>", e)
        raise StatementExecutionError(_error_context(e, request)) from e
    finally:
        close_quietly(conn)


def run_operation(
    user: str | None,
    password: str | None,
    connect_target: str | None,
    sql: str | None,
    params: dict[str, Any] | str | None = None,
    *,
    sql_field: str = "sql",
) -> ExecutionResult:
    """Validate raw inputs and execute; shared by the HTTP routes and the template tags."""
    descriptor, request = build_request(
        user, password, connect_target, sql, params, sql_field=sql_field
    )
    return execute_statement(descriptor, request)
