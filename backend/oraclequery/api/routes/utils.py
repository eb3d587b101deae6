from typing import Any

from fastapi import APIRouter, Request

from oraclequery.core.health import status_payload

router = APIRouter(prefix="", tags=["utils"])


@router.get("/status")
async def status() -> dict[str, Any]:
    """
    Liveness check: no database I/O.
    """
    return status_payload()


@router.post("/echo")
async def echo(request: Request) -> Any:
    """Return the JSON body unchanged (diagnostics)."""
    return await request.json()
