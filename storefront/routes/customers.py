"""Customer account routes."""

from __future__ import annotations

from flask import Blueprint

from ..common.utils.validators import require_str
from .commands import (
    parse_address_update,
    parse_credentials,
    parse_profile_update,
    parse_registration,
    request_payload,
)
from .context import components, token_required
from .responses import ok


customers_bp = Blueprint("customers", __name__)


def _customers():
    return components()["customer_service"]


def _with_token(customer: dict) -> dict:
    issued = components()["token_service"].issue(customer["customer_id"])
    return {"customer": customer, "accessToken": issued.access_token, "expires_in": issued.expires_in}


@customers_bp.post("/customers")
def register():
    cmd = parse_registration(request_payload())
    customer = _customers().register(name=cmd.name, email=cmd.email, password=cmd.password)
    return ok(_with_token(customer), 201)


@customers_bp.post("/customers/login")
def login():
    cmd = parse_credentials(request_payload())
    customer = _customers().login(email=cmd.email, password=cmd.password)
    return ok(_with_token(customer))


@customers_bp.get("/customer")
@token_required
def get_profile(customer_id: int):
    return ok(_customers().get_profile(customer_id))


@customers_bp.put("/customer")
@token_required
def update_profile(customer_id: int):
    return ok(_customers().update_profile(customer_id, parse_profile_update(request_payload())))


@customers_bp.put("/customers/address")
@token_required
def update_address(customer_id: int):
    return ok(_customers().update_address(customer_id, parse_address_update(request_payload())))


@customers_bp.put("/customers/creditCard")
@token_required
def update_credit_card(customer_id: int):
    credit_card = require_str(request_payload().get("credit_card"), "credit_card")
    return ok(_customers().update_credit_card(customer_id, credit_card))
