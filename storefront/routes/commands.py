"""Parse request parameters into typed command objects.

Each ``parse_*`` helper reads a JSON or form body once and raises
``ValidationError`` naming the offending field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from flask import request

from ..common.errors import ValidationError
from ..common.services import AddressUpdate, CheckoutCommand, ProfileUpdate
from ..common.utils.validators import (
    bounded_str,
    ensure_positive_int,
    optional_positive_int,
    optional_str,
    require_str,
)


# width of the shopping_cart.cart_id column
CART_ID_LENGTH = 32


@dataclass(frozen=True)
class AddCartItem:
    cart_id: str
    product_id: int
    attributes: str


@dataclass(frozen=True)
class Registration:
    name: str
    email: str
    password: str


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str


@dataclass(frozen=True)
class PageQuery:
    page: Optional[int]
    limit: Optional[int]
    description_length: Optional[int]


def request_payload() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def _email(value: Any) -> str:
    email = require_str(value, "email")
    local, _, domain = email.partition("@")
    if not local or "." not in domain:
        raise ValidationError("The email is invalid", code="USR_03", field="email")
    return email


def parse_add_cart_item(data: Mapping[str, Any]) -> AddCartItem:
    return AddCartItem(
        cart_id=bounded_str(data.get("cart_id"), "cart_id", CART_ID_LENGTH),
        product_id=ensure_positive_int(data.get("product_id"), "product_id"),
        attributes=require_str(data.get("attributes"), "attributes"),
    )


def parse_quantity(data: Mapping[str, Any]) -> int:
    return ensure_positive_int(data.get("quantity"), "quantity")


def parse_checkout(data: Mapping[str, Any]) -> CheckoutCommand:
    return CheckoutCommand(
        cart_id=bounded_str(data.get("cart_id"), "cart_id", CART_ID_LENGTH),
        shipping_id=ensure_positive_int(data.get("shipping_id"), "shipping_id"),
        tax_id=ensure_positive_int(data.get("tax_id"), "tax_id"),
    )


def parse_registration(data: Mapping[str, Any]) -> Registration:
    return Registration(
        name=require_str(data.get("name"), "name"),
        email=_email(data.get("email")),
        password=require_str(data.get("password"), "password"),
    )


def parse_credentials(data: Mapping[str, Any]) -> Credentials:
    return Credentials(
        email=_email(data.get("email")),
        password=require_str(data.get("password"), "password"),
    )


def _optional(data: Mapping[str, Any], field: str) -> Optional[str]:
    value = data.get(field)
    if value in (None, ""):
        return None
    return optional_str(value, field)


def parse_profile_update(data: Mapping[str, Any]) -> ProfileUpdate:
    return ProfileUpdate(
        name=require_str(data.get("name"), "name"),
        email=_email(data.get("email")),
        password=_optional(data, "password"),
        day_phone=_optional(data, "day_phone"),
        eve_phone=_optional(data, "eve_phone"),
        mob_phone=_optional(data, "mob_phone"),
    )


def parse_address_update(data: Mapping[str, Any]) -> AddressUpdate:
    return AddressUpdate(
        address_1=require_str(data.get("address_1"), "address_1"),
        address_2=_optional(data, "address_2"),
        city=require_str(data.get("city"), "city"),
        region=require_str(data.get("region"), "region"),
        postal_code=require_str(data.get("postal_code"), "postal_code"),
        country=require_str(data.get("country"), "country"),
        shipping_region_id=ensure_positive_int(data.get("shipping_region_id"), "shipping_region_id"),
    )


def parse_page_query(args: Mapping[str, Any]) -> PageQuery:
    return PageQuery(
        page=optional_positive_int(args.get("page"), "page"),
        limit=optional_positive_int(args.get("limit"), "limit"),
        description_length=optional_positive_int(args.get("description_length"), "description_length"),
    )
