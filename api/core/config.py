"""
Process configuration.

Settings are read once from the environment (after loading `.env`) into an
immutable struct. Components receive the struct in their constructor so tests
can build any flag combination without touching `os.environ`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_SENDGRID_BASE_URL = "https://api.sendgrid.com"


def _env_str(environ: Mapping[str, str], name: str, default: str = "") -> str:
    return (environ.get(name) or default).strip()


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = _env_str(environ, name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Invalid integer for {name}: {raw!r}") from None


def _env_list(environ: Mapping[str, str], name: str, default: str) -> tuple[str, ...]:
    raw = _env_str(environ, name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    database_url: str = ""
    database_api_key: str = ""
    sendgrid_api_key: str = ""
    sendgrid_sender: str = ""
    sendgrid_base_url: str = DEFAULT_SENDGRID_BASE_URL
    api_key: str = ""
    allow_insecure: bool = False
    port: int = 3000
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)

    @property
    def store_configured(self) -> bool:
        return bool(self.database_url)

    @property
    def email_configured(self) -> bool:
        return bool(self.sendgrid_api_key and self.sendgrid_sender)

    @property
    def enforce_api_key(self) -> bool:
        return bool(self.api_key) and not self.allow_insecure


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build `Settings` from environment variables.

    When `environ` is omitted, `.env` is loaded first and `os.environ` is used.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        database_url=_env_str(environ, "DATABASE_URL"),
        database_api_key=_env_str(environ, "DATABASE_API_KEY"),
        sendgrid_api_key=_env_str(environ, "SENDGRID_API_KEY"),
        sendgrid_sender=_env_str(environ, "SENDGRID_SENDER"),
        sendgrid_base_url=_env_str(environ, "SENDGRID_BASE_URL", DEFAULT_SENDGRID_BASE_URL),
        api_key=_env_str(environ, "BIZFLOW_API_KEY"),
        allow_insecure=_env_str(environ, "BIZFLOW_ALLOW_INSECURE") == "true",
        port=_env_int(environ, "PORT", 3000),
        environment=_env_str(environ, "APP_ENV", "development"),
        log_level=_env_str(environ, "LOG_LEVEL", "INFO"),
        cors_origins=_env_list(environ, "CORS_ORIGINS", "*"),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
