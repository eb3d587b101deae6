"""
Plugin entry point for the host application.

load() configures the Oracle driver, starts the listener and hands back the
template tags; the host calls shutdown() when it is closing.
"""

import logging
from typing import Any

from jinja2 import Environment

from oraclequery.core.config import settings
from oraclequery.core.db import init_driver
from oraclequery.main import app as default_app
from oraclequery.plugin.extensions import TEMPLATE_TAG_EXTENSIONS
from oraclequery.plugin.server import ServerHandle
from oraclequery.plugin.template_tags import TEMPLATE_TAGS, TemplateTag

logger = logging.getLogger(__name__)


class OracleQueryPlugin:
    def __init__(self, server: ServerHandle | None = None, app: Any = None) -> None:
        if server is None:
            server = ServerHandle(
                app if app is not None else default_app,
                host=settings.LISTEN_HOST,
                port=settings.LISTEN_PORT,
                log_level=settings.LOG_LEVEL,
                startup_timeout=settings.LISTEN_STARTUP_TIMEOUT,
            )
        self.server = server

    @property
    def template_tags(self) -> list[TemplateTag]:
        return TEMPLATE_TAGS

    def load(self) -> list[TemplateTag]:
        init_driver()
        if not self.server.start():
            logger.error("Template tags remain available without the HTTP listener")
        return self.template_tags

    def register(self, env: Environment) -> Environment:
        """Install the template-tag extensions into a Jinja2 environment."""
        for ext in TEMPLATE_TAG_EXTENSIONS:
            env.add_extension(ext)
        return env

    def shutdown(self) -> None:
        self.server.stop()
