"""Catalog routes: products, departments and categories."""

from __future__ import annotations

from flask import Blueprint, request

from ..common.errors import ValidationError
from ..common.utils.validators import require_str
from .commands import parse_page_query
from .context import components
from .responses import ok


products_bp = Blueprint("products", __name__)


def _catalog():
    return components()["catalog_service"]


@products_bp.get("/products")
def list_products():
    q = parse_page_query(request.args)
    return ok(_catalog().list_products(page=q.page, limit=q.limit, description_length=q.description_length))


@products_bp.get("/products/search")
def search_products():
    q = parse_page_query(request.args)
    query_string = require_str(request.args.get("query_string"), "query_string")
    all_words = request.args.get("all_words", "on")
    if all_words not in ("on", "off"):
        raise ValidationError("The field all_words must be 'on' or 'off'", field="all_words")
    result = _catalog().search_products(
        query_string=query_string,
        all_words=all_words == "on",
        page=q.page,
        limit=q.limit,
        description_length=q.description_length,
    )
    return ok(result)


@products_bp.get("/products/<id:product_id>")
def get_product(product_id: int):
    return ok(_catalog().get_product(product_id))


@products_bp.get("/products/inCategory/<id:category_id>")
def products_in_category(category_id: int):
    q = parse_page_query(request.args)
    return ok(_catalog().products_in_category(category_id, page=q.page, limit=q.limit, description_length=q.description_length))


@products_bp.get("/products/inDepartment/<id:department_id>")
def products_in_department(department_id: int):
    q = parse_page_query(request.args)
    return ok(_catalog().products_in_department(department_id, page=q.page, limit=q.limit, description_length=q.description_length))


@products_bp.get("/departments")
def list_departments():
    return ok(_catalog().list_departments())


@products_bp.get("/departments/<id:department_id>")
def get_department(department_id: int):
    return ok(_catalog().get_department(department_id))


@products_bp.get("/categories")
def list_categories():
    q = parse_page_query(request.args)
    return ok(_catalog().list_categories(order=request.args.get("order"), page=q.page, limit=q.limit))


@products_bp.get("/categories/<id:category_id>")
def get_category(category_id: int):
    return ok(_catalog().get_category(category_id))


@products_bp.get("/categories/inDepartment/<id:department_id>")
def categories_in_department(department_id: int):
    return ok(_catalog().categories_in_department(department_id))


@products_bp.get("/categories/inProduct/<id:product_id>")
def categories_of_product(product_id: int):
    return ok(_catalog().categories_of_product(product_id))
