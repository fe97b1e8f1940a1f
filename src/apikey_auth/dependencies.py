from __future__ import annotations

from fastapi import Depends, Request

from .auth import optional_api_key, require_api_key
from .config import Settings, get_settings


def settings_dependency() -> Settings:
    return get_settings()


def api_key_dependency(request: Request, settings: Settings = Depends(settings_dependency)) -> str:
    return require_api_key(settings.api_key, request.headers)


def optional_api_key_dependency(
    request: Request, settings: Settings = Depends(settings_dependency)
) -> str | None:
    return optional_api_key(settings.api_key, request.headers)
