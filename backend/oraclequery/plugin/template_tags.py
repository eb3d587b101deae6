"""
Template tags exposed to the host application.

A tag is a named, described unit with typed arguments; the host renders the
argument inputs and calls ``run(context, *args)`` synchronously, using the
returned text inline.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal

from fastapi.encoders import jsonable_encoder

from oraclequery.engines.sql import run_operation

ArgType = Literal["string", "number", "boolean", "enum"]


@dataclass(frozen=True)
class TemplateTagArg:
    display_name: str
    type: ArgType = "string"
    placeholder: str = ""
    optional: bool = False


@dataclass(frozen=True)
class TemplateTag:
    name: str
    display_name: str
    description: str
    run: Callable[..., str]
    args: list[TemplateTagArg] = field(default_factory=list)

    def describe(self) -> dict[str, Any]:
        """Descriptor without the callable, for the host's tag picker."""
        return {
            "name": self.name,
            "displayName": self.display_name,
            "description": self.description,
            "args": [
                {
                    "displayName": a.display_name,
                    "type": a.type,
                    "placeholder": a.placeholder,
                    "optional": a.optional,
                }
                for a in self.args
            ],
        }


def render_result(result: Any) -> str:
    """Pretty-printed JSON (indent 2) of an ExecutionResult."""
    data = jsonable_encoder(result.model_dump(by_alias=True))
    return json.dumps(data, indent=2, ensure_ascii=False)


def run_oracle_operation(
    context: Any,  # noqa: ARG001 - host render context, unused
    user: str | None,
    password: str | None,
    connect_string: str | None,
    sql: str | None,
    params: str | None = None,
) -> str:
    """Execute one statement and return its result as JSON text. Errors propagate to the host."""
    result = run_operation(user, password, connect_string, sql, params)
    return render_result(result)


ORACLE_OPERATION_TAG = TemplateTag(
    name="oracle_operation",
    display_name="Oracle Operation",
    description="Executa uma operação SQL no Oracle (SELECT, INSERT, UPDATE, DELETE) e retorna JSON",
    run=run_oracle_operation,
    args=[
        TemplateTagArg("User", placeholder="Usuário do Oracle"),
        TemplateTagArg("Password", placeholder="Senha do Oracle"),
        TemplateTagArg("Connect String", placeholder="host:port/service_name"),
        TemplateTagArg("SQL", placeholder="SELECT * FROM tabela WHERE id = :id"),
        TemplateTagArg("Params (JSON)", placeholder='{"id": 1}', optional=True),
    ],
)


def run_oracle_query(
    context: Any,  # noqa: ARG001 - host render context, unused
    user: str | None,
    password: str | None,
    connect_string: str | None,
    query: str | None,
) -> str:
    """Older four-argument form: one statement, no bind parameters."""
    result = run_operation(user, password, connect_string, query, sql_field="query")
    return render_result(result)


ORACLE_QUERY_TAG = TemplateTag(
    name="oracle_query",
    display_name="Oracle Query",
    description="Executa uma consulta SELECT no Oracle e retorna JSON",
    run=run_oracle_query,
    args=[
        TemplateTagArg("User", placeholder="Usuário do Oracle"),
        TemplateTagArg("Password", placeholder="Senha do Oracle"),
        TemplateTagArg("Connect String", placeholder="host:port/service_name"),
        TemplateTagArg("Query", placeholder="SELECT * FROM tabela"),
    ],
)

TEMPLATE_TAGS: list[TemplateTag] = [ORACLE_OPERATION_TAG, ORACLE_QUERY_TAG]
