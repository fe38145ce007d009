from flask import Blueprint

from .context import components
from .responses import ok


attributes_bp = Blueprint("attributes", __name__)


def _attributes():
    return components()["attribute_service"]


@attributes_bp.get("/attributes")
def list_attributes():
    return ok(_attributes().list_attributes())


@attributes_bp.get("/attributes/<id:attribute_id>")
def get_attribute(attribute_id: int):
    return ok(_attributes().get_attribute(attribute_id))


@attributes_bp.get("/attributes/values/<id:attribute_id>")
def attribute_values(attribute_id: int):
    return ok(_attributes().attribute_values(attribute_id))


@attributes_bp.get("/attributes/inProduct/<id:product_id>")
def product_attributes(product_id: int):
    return ok(_attributes().product_attributes(product_id))
