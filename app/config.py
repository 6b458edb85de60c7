# app/config.py
from __future__ import annotations
import os
from typing import List
from pydantic import BaseModel


class Settings(BaseModel):
    # App
    app_name: str = "Ref Resolver Service"
    service_name: str = os.getenv("SERVICE_NAME", "ref-resolver")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "9020"))

    # Upstream git host (smart HTTP)
    git_base_url: str = os.getenv("GIT_BASE_URL", "https://github.com")
    # git accepts basic auth with any user name and the token as password
    basic_auth_user: str = os.getenv("GIT_BASIC_AUTH_USER", "any_user")

    # HTTP client defaults
    http_timeout_seconds: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # CORS
    cors_origins: List[str] = [
        o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
    ]


settings = Settings()

__all__ = ["Settings", "settings"]
