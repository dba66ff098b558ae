"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from salesmaster.clients.gemini import DEFAULT_MODEL
from salesmaster.domain.errors import ConfigurationError

DEFAULT_APP_ID = "default-app-id"
DEFAULT_ADMIN_PASSWORDS = ("admin", "admin123")


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    database_url: Optional[str] = None
    database_path: Optional[str] = None
    app_id: str = DEFAULT_APP_ID
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_MODEL
    admin_passwords: tuple[str, ...] = DEFAULT_ADMIN_PASSWORDS
    anonymous_auth: bool = True
    http_timeout: float = 30.0

    @property
    def collection(self) -> str:
        """Path of the shared account collection."""
        return f"artifacts/{self.app_id}/public/data/sales_master"


def _flag(value: str) -> bool:
    return value.strip().lower() not in {"0", "false", "no", "off"}


def load_settings(
    environ: Optional[Mapping[str, str]] = None, database_path: Optional[str] = None
) -> Settings:
    """Build settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)
        database_path: Explicit SQLite path that overrides SALESMASTER_DB_PATH

    Raises:
        ConfigurationError: If a numeric setting cannot be parsed
    """
    env = os.environ if environ is None else environ

    timeout_text = env.get("SALESMASTER_HTTP_TIMEOUT", "30")
    try:
        timeout = float(timeout_text)
    except ValueError:
        raise ConfigurationError(
            f"Invalid SALESMASTER_HTTP_TIMEOUT '{timeout_text}'",
            "Set SALESMASTER_HTTP_TIMEOUT to a number of seconds.",
        )

    passwords = DEFAULT_ADMIN_PASSWORDS
    if env.get("SALESMASTER_ADMIN_PASSWORD"):
        passwords = tuple(
            p.strip() for p in env["SALESMASTER_ADMIN_PASSWORD"].split(",") if p.strip()
        )

    return Settings(
        database_url=env.get("SALESMASTER_DB_URL") or None,
        database_path=database_path or env.get("SALESMASTER_DB_PATH") or None,
        app_id=env.get("SALESMASTER_APP_ID") or DEFAULT_APP_ID,
        gemini_api_key=env.get("SALESMASTER_GEMINI_API_KEY") or None,
        gemini_model=env.get("SALESMASTER_GEMINI_MODEL") or DEFAULT_MODEL,
        admin_passwords=passwords,
        anonymous_auth=_flag(env.get("SALESMASTER_ANONYMOUS_AUTH", "1")),
        http_timeout=timeout,
    )
