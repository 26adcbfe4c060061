import os
from dataclasses import dataclass
from typing import Mapping, Optional


API_KEY_HEADER = "X-API-Key"
DEV_API_KEY = "secret-api-key-123"


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 3000
    api_key: str = DEV_API_KEY
    api_key_from_env: bool = False
    default_page_limit: int = 10
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        api_key = env.get("API_KEY") or ""
        limit = int(env.get("DEFAULT_PAGE_LIMIT", "10"))
        if limit < 1:
            raise ValueError(f"DEFAULT_PAGE_LIMIT must be positive, got {limit}")
        return cls(
            host=env.get("HOST", "127.0.0.1"),
            port=int(env.get("PORT", "3000")),
            api_key=api_key or DEV_API_KEY,
            api_key_from_env=bool(api_key),
            default_page_limit=limit,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )
