"""
SQL execution against Oracle.

Exports: execute_statement, run_operation, build_request, normalize, substitute.
"""

from oraclequery.engines.sql.debug_sql import substitute
from oraclequery.engines.sql.executor import (
    build_request,
    execute_statement,
    parse_parameters,
    run_operation,
)
from oraclequery.engines.sql.normalizer import normalize, operation_kind

__all__ = [
    "build_request",
    "execute_statement",
    "normalize",
    "operation_kind",
    "parse_parameters",
    "run_operation",
    "substitute",
]
