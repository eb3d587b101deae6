"""
Oracle connection helpers (python-oracledb).

One connection per call: connect, execute, read the cursor, close. Thin mode
needs no Oracle client libraries; thick mode is opt-in via settings.
"""

import logging
import threading
from typing import Any

import oracledb

from oraclequery.core.config import settings

logger = logging.getLogger(__name__)

_driver_lock = threading.Lock()
_driver_initialized = False


def init_driver() -> bool:
    """
    Configure python-oracledb once per process. Returns True when configured.

    Failure is logged and swallowed: thin mode still works without it.
    """
    global _driver_initialized
    with _driver_lock:
        if _driver_initialized:
            return True
        try:
            if settings.ORACLE_DRIVER_MODE == "thick":
                oracledb.init_oracle_client(lib_dir=settings.ORACLE_CLIENT_LIB_DIR)
            _driver_initialized = True
            logger.info(
                "python-oracledb %s initialized (%s mode)",
                oracledb.__version__,
                "thin" if oracledb.is_thin_mode() else "thick",
            )
        except Exception:
            logger.exception("Failed to initialize python-oracledb")
        return _driver_initialized


def lob_output_type_handler(cursor: Any, metadata: Any) -> Any:
    """Fetch BLOB as bytes and CLOB/NCLOB as str instead of LOB locators."""
    if metadata.type_code == oracledb.DB_TYPE_BLOB:
        return cursor.var(oracledb.DB_TYPE_LONG_RAW, arraysize=cursor.arraysize)
    if metadata.type_code == oracledb.DB_TYPE_CLOB:
        return cursor.var(oracledb.DB_TYPE_LONG, arraysize=cursor.arraysize)
    if metadata.type_code == oracledb.DB_TYPE_NCLOB:
        return cursor.var(oracledb.DB_TYPE_LONG_NVARCHAR, arraysize=cursor.arraysize)
    return None


def connect(user: str, password: str, connect_string: str) -> Any:
    """
    Open a connection to Oracle with auto-commit enabled.

    connect_string is an Easy Connect target (host:port/service_name) or a
    TNS alias. LOB columns are fetched inline on this connection regardless
    of oracledb.defaults.
    """
    conn = oracledb.connect(user=user, password=password, dsn=connect_string)
    try:
        conn.autocommit = True
        conn.outputtypehandler = lob_output_type_handler
    except Exception:
        close_quietly(conn)
        raise
    return conn


def execute(conn: Any, sql: str, params: dict[str, Any] | None = None) -> Any:
    """Execute SQL with named bind parameters and return the cursor."""
    cur = conn.cursor()
    if params:
        cur.execute(sql, params)
    else:
        cur.execute(sql)
    return cur


def cursor_to_dicts(cursor: Any) -> list[dict[str, Any]]:
    """Convert cursor result to list of dicts keyed by column name."""
    desc = cursor.description
    if not desc:
        return []
    names = [d[0] for d in desc]
    return [dict(zip(names, row, strict=True)) for row in cursor.fetchall()]


def close_quietly(conn: Any) -> None:
    """Close conn; a failure is logged, never raised."""
    try:
        conn.close()
    except Exception:
        logger.warning("Failed to close Oracle connection", exc_info=True)
