"""
Error taxonomy for the query gateway.

ValidationError / ParameterParseError are raised before any connection is
attempted (HTTP 400). ExecutionError subclasses wrap driver failures and carry
an ErrorContext for the 500 envelope. Failures while closing a connection are
logged by the executor and never raised.
"""

from dataclasses import dataclass, field
from typing import Any


def required_fields_message(sql_field: str = "sql") -> str:
    """Names the statement field the way the caller sent it (sql or query)."""
    return f"Parâmetros obrigatórios faltando: user, password, connectString, {sql_field}"


REQUIRED_FIELDS_MESSAGE = required_fields_message()


@dataclass
class ErrorContext:
    """What a caller needs to reproduce a failed statement."""

    message: str
    debug_sql: str
    original_sql: str
    original_parameters: dict[str, Any] = field(default_factory=dict)


class GatewayError(Exception):
    """Base class for every error raised by the gateway."""


class ValidationError(GatewayError):
    """A required field is missing or empty."""

    def __init__(self, message: str = REQUIRED_FIELDS_MESSAGE, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing = missing or []


class ParameterParseError(ValidationError):
    """Named parameters were given as text that is not a JSON object."""


class ExecutionError(GatewayError):
    """The database rejected the connection or the statement."""

    def __init__(self, context: ErrorContext) -> None:
        super().__init__(context.message)
        self.context = context


class DatabaseConnectionError(ExecutionError):
    """Authentication or network failure while opening the connection."""


class StatementExecutionError(ExecutionError):
    """Engine-reported error while running the statement."""
