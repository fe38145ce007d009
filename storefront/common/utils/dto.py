from decimal import Decimal
from typing import Any, Dict, Optional


def money(value: Any) -> str:
    return str(Decimal(value or 0).quantize(Decimal("0.01")))


def truncate(text: Optional[str], length: int) -> str:
    return (text or "")[:length]


def to_product_dto(row: Any, description_length: int = 200) -> Dict:
    return {
        "product_id": row.product_id,
        "name": row.name,
        "description": truncate(row.description, description_length),
        "price": money(row.price),
        "discounted_price": money(row.discounted_price),
        "image": getattr(row, "image", None),
        "image_2": getattr(row, "image_2", None),
        "thumbnail": row.thumbnail,
        "display": getattr(row, "display", 0) or 0,
    }


def to_customer_dto(row: Any) -> Dict:
    card = row.credit_card or None
    return {
        "customer_id": row.customer_id,
        "name": row.name,
        "email": row.email,
        "address_1": row.address_1,
        "address_2": row.address_2,
        "city": row.city,
        "region": row.region,
        "postal_code": row.postal_code,
        "country": row.country,
        "shipping_region_id": row.shipping_region_id,
        "day_phone": row.day_phone,
        "eve_phone": row.eve_phone,
        "mob_phone": row.mob_phone,
        "credit_card": ("XXXXXXXX" + card[-4:]) if card else None,
    }


def to_order_dto(row: Any) -> Dict:
    return {
        "order_id": row.order_id,
        "customer_id": row.customer_id,
        "total_amount": money(row.total_amount),
        "shipping_id": row.shipping_id,
        "tax_id": row.tax_id,
        "status": row.status,
        "created_on": row.created_on.isoformat() if row.created_on else None,
        "shipped_on": row.shipped_on.isoformat() if row.shipped_on else None,
    }
