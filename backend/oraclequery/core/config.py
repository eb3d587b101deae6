from typing import Annotated, Any, Literal

from pydantic import AnyUrl, BeforeValidator, HttpUrl, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Use top level .env file (one level above ./backend/)
        env_file="../.env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Oracle Query Gateway"
    SERVICE_NAME: str = "Oracle Query Endpoint"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    SENTRY_DSN: HttpUrl | None = None
    LOG_LEVEL: str = "INFO"

    BACKEND_CORS_ORIGINS: Annotated[
        list[AnyUrl] | str, BeforeValidator(parse_cors)
    ] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS]

    # Listener started by the host plugin
    LISTEN_HOST: str = "127.0.0.1"
    LISTEN_PORT: int = 3000
    LISTEN_STARTUP_TIMEOUT: float = 5.0

    # python-oracledb: thin needs no client libraries; thick uses Instant Client
    ORACLE_DRIVER_MODE: Literal["thin", "thick"] = "thin"
    ORACLE_CLIENT_LIB_DIR: str | None = None

    # 500 responses carry the traceback in "details" when True
    EXPOSE_ERROR_DETAILS: bool = True


settings = Settings()  # type: ignore
