from __future__ import annotations

from functools import wraps
from typing import Any, Dict

from flask import current_app, request


def components() -> Dict[str, Any]:
    return current_app.extensions["storefront_components"]


def customer_credential() -> str:
    return request.headers.get("USER-KEY") or request.headers.get("Authorization") or ""


def token_required(view):
    """Verify the bearer token and pass ``customer_id`` to the view."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        customer_id = components()["token_service"].verify(customer_credential())
        return view(*args, customer_id=customer_id, **kwargs)

    return wrapper
