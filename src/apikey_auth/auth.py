from __future__ import annotations

import hmac
import logging
from enum import Enum
from typing import Mapping, Sequence, Tuple, Union

from fastapi import HTTPException

logger = logging.getLogger(__name__)

AUTHORIZATION = "Authorization"
SCHEME = "ApiKey"

HeaderCollection = Mapping[str, Union[str, Sequence[str]]]


class AuthErrorKind(Enum):
    """Why an API key could not be read from the headers."""

    NO_AUTH_HEADER = "no authorization header included"
    MALFORMED = "malformed authorization header"


class AuthError(ValueError):
    def __init__(self, kind: AuthErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def _authorization_value(headers: HeaderCollection | None) -> str:
    if not headers:
        return ""
    getlist = getattr(headers, "getlist", None)
    if getlist is not None:
        values = getlist(AUTHORIZATION)
    else:
        values = headers.get(AUTHORIZATION)
    if not values:
        return ""
    if isinstance(values, str):
        return values
    return values[0]


def get_api_key(headers: HeaderCollection | None) -> Tuple[str, AuthErrorKind | None]:
    """Return the key from an ``Authorization: ApiKey <key>`` header.

    The result is ``(key, None)`` on success and ``("", kind)`` otherwise.
    Tokens after the key are ignored. A value of the scheme followed only by
    trailing whitespace (``"ApiKey "``) yields ``("", None)``.
    """
    value = _authorization_value(headers)
    if not value:
        return "", AuthErrorKind.NO_AUTH_HEADER

    if value != SCHEME and value.rstrip() == SCHEME:
        return "", None

    parts = value.split()
    if len(parts) < 2 or parts[0] != SCHEME:
        return "", AuthErrorKind.MALFORMED
    return parts[1], None


def extract_api_key(headers: HeaderCollection | None) -> str:
    key, error = get_api_key(headers)
    if error is not None:
        raise AuthError(error)
    return key


_DETAILS = {
    AuthErrorKind.NO_AUTH_HEADER: "Missing API key",
    AuthErrorKind.MALFORMED: "Malformed authorization header",
}


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=401, detail=detail, headers={"WWW-Authenticate": SCHEME})


def _check(expected: str, key: str) -> None:
    if not key or not hmac.compare_digest(key.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("Rejected request: API key mismatch")
        raise _unauthorized("Invalid API key")


def require_api_key(expected: str, headers: HeaderCollection | None) -> str:
    key, error = get_api_key(headers)
    if error is not None:
        logger.warning("Rejected request: %s", error.name)
        raise _unauthorized(_DETAILS[error])
    _check(expected, key)
    return key


def optional_api_key(expected: str, headers: HeaderCollection | None) -> str | None:
    key, error = get_api_key(headers)
    if error is AuthErrorKind.NO_AUTH_HEADER:
        return None
    if error is not None:
        logger.warning("Rejected request: %s", error.name)
        raise _unauthorized(_DETAILS[error])
    _check(expected, key)
    return key
