import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv


class ConfigError(RuntimeError):
    """Raised when the process cannot start with the given environment."""


@dataclass(frozen=True)
class Settings:
    secret_key: str
    database_url: str
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


def _required(env: Mapping[str, str], name: str) -> str:
    value = (env.get(name) or "").strip()
    if not value:
        raise ConfigError(f"{name} environment variable is missing")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Resolve process configuration once, at startup.

    A local .env file is honoured when reading the real environment; values
    already exported take precedence over it.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        environ = os.environ

    port = environ.get("PORT", "8000")
    try:
        port_number = int(port)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {port!r}")

    return Settings(
        secret_key=_required(environ, "SECRET_KEY"),
        database_url=_required(environ, "DATABASE_URL"),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        host=environ.get("HOST", "127.0.0.1"),
        port=port_number,
    )
