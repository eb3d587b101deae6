"""
Render SQL with named parameters inlined, for error messages only.

The result is never executed; statements always run with bind parameters.
"""

import re
from typing import Any

# Single-quote escape for SQL strings
_SQL_QUOTE_ESCAPE = str.maketrans({"'": "''"})


def _literal(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, str):
        return "'" + value.translate(_SQL_QUOTE_ESCAPE) + "'"
    return str(value)


def substitute(sql: str, named_parameters: dict[str, Any] | None) -> str:
    """Replace every ``:name`` (whole word) with a SQL literal of its value."""
    out = sql
    for name, value in (named_parameters or {}).items():
        literal = _literal(value)
        out = re.sub(rf":{re.escape(str(name))}\b", lambda _m: literal, out)
    return out
