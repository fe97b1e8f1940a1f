from __future__ import annotations

from fastapi import APIRouter, Depends

from ..auth import SCHEME, AuthErrorKind
from ..dependencies import api_key_dependency, optional_api_key_dependency

router = APIRouter(prefix="/v1/auth")


@router.get("/verify")
async def verify(_key: str = Depends(api_key_dependency)) -> dict:
    return {"ok": True}


@router.get("/inspect")
async def inspect_header(key: str | None = Depends(optional_api_key_dependency)) -> dict:
    return {
        "scheme": SCHEME,
        "present": key is not None,
        "error": None if key is not None else AuthErrorKind.NO_AUTH_HEADER.name,
    }
