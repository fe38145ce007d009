from flask import Blueprint

from .context import components
from .responses import ok


shipping_bp = Blueprint("shipping", __name__)


@shipping_bp.get("/shipping/regions")
def list_regions():
    return ok(components()["shipping_service"].list_regions())


@shipping_bp.get("/shipping/regions/<id:shipping_region_id>")
def shipping_options(shipping_region_id: int):
    return ok(components()["shipping_service"].shipping_options(shipping_region_id))


@shipping_bp.get("/tax")
def list_taxes():
    return ok(components()["tax_service"].list_taxes())


@shipping_bp.get("/tax/<id:tax_id>")
def get_tax(tax_id: int):
    return ok(components()["tax_service"].get_tax(tax_id))
