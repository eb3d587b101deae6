"""
Status check payload. No I/O: the gateway holds no database of its own.
"""

from datetime import datetime, timezone
from typing import Any

from oraclequery.core.config import settings

FEATURES: list[str] = [
    "SELECT",
    "INSERT",
    "UPDATE",
    "DELETE",
    "named-parameters",
    "binary-as-hex",
    "debug-sql",
]


def status_payload() -> dict[str, Any]:
    return {
        "status": "online",
        "service": settings.SERVICE_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "features": FEATURES,
    }
