"""Configuration for the blog API gateway.

Values come from the process environment (optionally seeded from a ``.env``
file by :func:`blog.create_app`):

- SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY: hosted store credentials. When
  either is missing the gateway falls back to the local database.
- LOCAL_DATABASE_URI: SQLAlchemy URI for the local store.
- HOST / PORT / FLASK_DEBUG: where and how ``server.py`` listens.
- CORS_ALLOW_ORIGIN: origin allowed by flask-cors (``*`` for any).
- LOG_LEVEL: root logging level for the entry points.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_PORT = 5000


def _clean(value: Optional[str]) -> Optional[str]:
    """Treat blanks and ``.env`` template placeholders as unset."""

    if value is None:
        return None
    value = value.strip()
    if not value or value.startswith("<") or value.lower().startswith("your"):
        return None
    return value


def _bool_from_env(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class GatewaySettings:
    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None
    local_database_uri: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    debug: bool = False
    cors_allow_origin: str = "*"
    log_level: str = "INFO"

    @property
    def uses_supabase(self) -> bool:
        return bool(self.supabase_url and self.supabase_service_role_key)

    @classmethod
    def from_env(cls) -> "GatewaySettings":
        return cls(
            supabase_url=_clean(os.environ.get("SUPABASE_URL")),
            supabase_service_role_key=_clean(os.environ.get("SUPABASE_SERVICE_ROLE_KEY")),
            local_database_uri=_clean(os.environ.get("LOCAL_DATABASE_URI")),
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT") or DEFAULT_PORT),
            debug=_bool_from_env("FLASK_DEBUG", False),
            cors_allow_origin=os.environ.get("CORS_ALLOW_ORIGIN", "*"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
