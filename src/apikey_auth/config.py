from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _comma_separated(value: str | None) -> List[str]:
    if not value:
        return ["*"]
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass
class Settings:
    """Runtime configuration loaded from environment variables."""

    api_key: str = field(default_factory=lambda: os.getenv("APIKEY_AUTH_KEY", "local-dev-key"))
    log_level: str = field(default_factory=lambda: os.getenv("APIKEY_AUTH_LOG_LEVEL", "INFO"))
    cors_allow_origins: List[str] = field(
        default_factory=lambda: _comma_separated(os.getenv("APIKEY_AUTH_CORS_ALLOW_ORIGINS"))
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
