"""Failure types raised by the store services.

Every error carries a short machine ``code`` (``USR_02``, ``PRO_01``...), a human
``message`` and optionally the request ``field`` it concerns. Mapping to
transport status codes lives in ``storefront.routes.responses``.
"""

from __future__ import annotations

from typing import Optional


class StoreError(Exception):
    default_code = "ERR_01"

    def __init__(self, message: str, *, code: Optional[str] = None, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.field = field

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "field": self.field}


class ValidationError(StoreError):
    default_code = "USR_02"


class NotFoundError(StoreError):
    default_code = "NOT_FOUND"


class AuthError(StoreError):
    INVALID_SCHEME = "invalid_scheme"
    INVALID_OR_EXPIRED = "invalid_or_expired"

    default_code = "AUT_02"

    def __init__(self, kind: str, message: Optional[str] = None, *, code: Optional[str] = None) -> None:
        if kind == self.INVALID_SCHEME:
            message = message or "Access Unauthorized"
        else:
            message = message or "The token is invalid or has expired"
        super().__init__(message, code=code, field="USER-KEY")
        self.kind = kind


class ConflictError(StoreError):
    default_code = "CONFLICT"


class PersistenceError(StoreError):
    default_code = "DB_01"
