"""
Explicitly owned HTTP listener: a uvicorn server in a daemon thread.

The host starts it when the plugin loads and stops it from its shutdown hook.
"""

import logging
import threading
import time
from typing import Any

import uvicorn

logger = logging.getLogger(__name__)


class ServerHandle:
    def __init__(
        self,
        app: Any,
        *,
        host: str,
        port: int,
        log_level: str = "info",
        startup_timeout: float = 5.0,
    ) -> None:
        self.app = app
        self.host = host
        self.port = port
        self.log_level = log_level
        self.startup_timeout = startup_timeout
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def running(self) -> bool:
        return (
            self._server is not None
            and self._thread is not None
            and self._thread.is_alive()
            and self._server.started
        )

    def start(self) -> bool:
        """Start listening. Returns False (and logs) if the server did not come up."""
        with self._lock:
            if self.running:
                return True
            config = uvicorn.Config(
                self.app,
                host=self.host,
                port=self.port,
                log_level=self.log_level.lower(),
            )
            server = uvicorn.Server(config)
            thread = threading.Thread(
                target=server.run, name="oraclequery-server", daemon=True
            )
            self._server, self._thread = server, thread
            thread.start()

            deadline = time.monotonic() + self.startup_timeout
            while not server.started:
                if not thread.is_alive() or time.monotonic() > deadline:
                    logger.error("Failed to start server on %s", self.url)
                    server.should_exit = True
                    self._server, self._thread = None, None
                    return False
                time.sleep(0.05)

        logger.info("Oracle query server listening on %s", self.url)
        logger.info("Endpoints: POST %s/query, POST %s/operation", self.url, self.url)
        return True

    def stop(self, timeout: float = 5.0) -> None:
        with self._lock:
            server, thread = self._server, self._thread
            self._server, self._thread = None, None
        if server is None or thread is None:
            return
        server.should_exit = True
        thread.join(timeout)
        if thread.is_alive():
            logger.warning("Server thread did not exit within %.1fs", timeout)
        else:
            logger.info("Oracle query server on %s stopped", self.url)
