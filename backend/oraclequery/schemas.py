"""
Pydantic schemas: request bodies and the normalized ExecutionResult variants.
"""

from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# Column values as fetched; binary is converted to hex text by the normalizer.
RowValue = str | int | float | bool | bytes | datetime | date | None

MutationKind = Literal["INSERT", "UPDATE", "DELETE"]


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class ConnectionDescriptor(BaseModel):
    """Credentials and target for one connection. Never logged."""

    user: str
    password: str = Field(repr=False)
    connect_target: str


class StatementRequest(BaseModel):
    sql: str
    named_parameters: dict[str, Any] = Field(default_factory=dict)


class OperationBody(BaseModel):
    """
    Body for POST /query and POST /operation.

    Fields are optional here so that missing ones are reported as a 400 by
    the gateway instead of a schema error. ``params`` may be a JSON object or
    JSON text.
    """

    model_config = ConfigDict(populate_by_name=True)

    user: str | None = None
    password: str | None = None
    connect_string: str | None = Field(default=None, alias="connectString")
    sql: str | None = None
    query: str | None = None
    params: dict[str, Any] | str | None = None

    @property
    def statement(self) -> str | None:
        return self.sql or self.query


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class _Result(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SelectResult(_Result):
    operation: Literal["SELECT"] = "SELECT"
    rows: list[dict[str, Any]]
    row_count: int = Field(alias="rowCount")


class MutationResult(_Result):
    operation: MutationKind
    row_count: int = Field(alias="rowCount")
    message: str


class GenericResult(_Result):
    operation: str
    message: str


ExecutionResult = SelectResult | MutationResult | GenericResult
