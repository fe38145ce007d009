"""Map service results and failures onto JSON responses."""

from __future__ import annotations

from typing import Any, Dict, Tuple

from flask import Response, jsonify

from ..common.errors import (
    AuthError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    StoreError,
    ValidationError,
)


STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
    (PersistenceError, 500),
)


def status_for(err: StoreError) -> int:
    for cls, status in STATUS_BY_ERROR:
        if isinstance(err, cls):
            return status
    return 500


def ok(result: Any, status: int = 200) -> Tuple[Response, int]:
    return jsonify(result), status


def error_body(code: str, message: str, status: int, field: Any = None) -> Dict[str, Any]:
    return {"error": {"status": status, "code": code, "message": message, "field": field}}


def error_response(err: StoreError) -> Tuple[Response, int]:
    status = status_for(err)
    if isinstance(err, PersistenceError):
        # store internals stay in the logs
        return jsonify(error_body(err.code, "A database error occurred", status)), status
    return jsonify(error_body(err.code, err.message, status, err.field)), status
