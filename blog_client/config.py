"""Client configuration loaded from the environment.

- BLOG_API_URL: base URL of the gateway (default http://localhost:5000)
- SUPABASE_ANON_KEY: public project key, forwarded as the ``apikey`` header.
  The blog gateway ignores it; it is for deployments that put the gateway
  behind Supabase's API gateway, which rejects requests without it.
- BLOG_API_TIMEOUT: request timeout in seconds (default 10)
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_URL = "http://localhost:5000"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass
class ClientSettings:
    """Where the client finds the gateway."""
    api_url: str = DEFAULT_API_URL
    anon_key: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def has_anon_key(self) -> bool:
        """Check the key is set and is not a ``.env`` placeholder."""
        return bool(
            self.anon_key
            and not self.anon_key.startswith("<")
            and not self.anon_key.startswith("your")
        )

    @classmethod
    def from_env(cls) -> "ClientSettings":
        return cls(
            api_url=os.getenv("BLOG_API_URL", DEFAULT_API_URL).rstrip("/"),
            anon_key=os.getenv("SUPABASE_ANON_KEY") or None,
            timeout=float(os.getenv("BLOG_API_TIMEOUT") or DEFAULT_TIMEOUT_SECONDS),
        )
