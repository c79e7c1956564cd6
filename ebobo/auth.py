"""Identify the caller of a request by its fingerprint header."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass

from ebobo.entities import FighterRecord, Store, StoreError
from ebobo.shared import AUTH_HEADER


class AuthErrorKind(enum.Enum):
    MISSING_FINGERPRINT = "missing fingerprint"
    MISSING_ADDRESS = "missing address"
    MISSING_FIGHTER = "missing fighter"
    INTERNAL_SERVER_ERROR = "internal server error"


_STATUS = {
    AuthErrorKind.MISSING_FINGERPRINT: 401,
    AuthErrorKind.MISSING_ADDRESS: 401,
    AuthErrorKind.MISSING_FIGHTER: 401,
    AuthErrorKind.INTERNAL_SERVER_ERROR: 500,
}


class AuthError(Exception):
    """A request could not be authenticated; carries the HTTP status to answer with."""

    def __init__(self, kind: AuthErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.status = _STATUS[kind]
        self.message = message or kind.value
        super().__init__(self.message)


@dataclass(frozen=True)
class Auth:
    """The authenticated caller and, if it chose one, its fighter."""

    fingerprint: str
    fighter: FighterRecord | None = None

    def require_fighter(self) -> FighterRecord:
        if self.fighter is None:
            raise AuthError(AuthErrorKind.MISSING_FIGHTER)
        return self.fighter


def _header(headers: Mapping[str, str], name: str) -> str | None:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def authenticate(
    headers: Mapping[str, str], client_ip: str | None, store: Store | None
) -> Auth:
    """Authenticate a request from its headers and client address."""
    fingerprint = _header(headers, AUTH_HEADER)
    if fingerprint is None:
        raise AuthError(AuthErrorKind.MISSING_FINGERPRINT)
    if store is None:
        raise AuthError(AuthErrorKind.INTERNAL_SERVER_ERROR, "missing application state")
    if client_ip is None:
        raise AuthError(AuthErrorKind.MISSING_ADDRESS)
    try:
        fighter = store.find_fighter(fingerprint)
    except StoreError as exc:
        raise AuthError(AuthErrorKind.INTERNAL_SERVER_ERROR, str(exc)) from exc
    return Auth(fingerprint, fighter)