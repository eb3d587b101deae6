"""
Shape a cursor into an ExecutionResult by the statement's leading keyword.

Classification is the first whitespace-delimited token of the trimmed SQL,
upper-cased. Comments before the keyword, WITH queries and batches are not
recognised and fall into the generic branch.
"""

from typing import Any

from oraclequery.core.db import cursor_to_dicts
from oraclequery.schemas import (
    ExecutionResult,
    GenericResult,
    MutationResult,
    RowValue,
    SelectResult,
)

MUTATION_KINDS = ("INSERT", "UPDATE", "DELETE")
GENERIC_MESSAGE = "Operação executada com sucesso"


def operation_kind(sql: str) -> str:
    """Leading keyword of sql, upper-cased; "" for blank SQL."""
    parts = sql.strip().split()
    return parts[0].upper() if parts else ""


def affected_rows_message(count: int) -> str:
    return f"{count} linha(s) afetada(s)"


def normalize_value(value: RowValue | Any) -> RowValue:
    """
    Binary values become uppercase hex; everything else passes through.

    LOB locators (anything with a read() method, e.g. oracledb.LOB) are read
    first, so a BLOB becomes hex and a CLOB becomes text.
    """
    read = getattr(value, "read", None)
    if callable(read):
        value = read()
    if isinstance(value, bytes | bytearray | memoryview):
        return bytes(value).hex().upper()
    return value


def normalize_row(row: dict[str, Any]) -> dict[str, Any]:
    return {key: normalize_value(value) for key, value in row.items()}


def normalize(kind: str, cursor: Any) -> ExecutionResult:
    if kind == "SELECT":
        rows = [normalize_row(row) for row in cursor_to_dicts(cursor)]
        return SelectResult(rows=rows, row_count=len(rows))
    if kind in MUTATION_KINDS:
        count = cursor.rowcount if cursor.rowcount is not None else 0
        return MutationResult(
            operation=kind,
            row_count=count,
            message=affected_rows_message(count),
        )
    return GenericResult(operation=kind, message=GENERIC_MESSAGE)
