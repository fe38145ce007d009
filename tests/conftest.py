from decimal import Decimal

import pytest

from storefront.app import create_app
from storefront.common.db import session as db
from storefront.common.models import (
    Attribute,
    AttributeValue,
    Category,
    Department,
    Product,
    ProductAttribute,
    ProductCategory,
    Shipping,
    ShippingRegion,
    Tax,
)
from storefront.config import AppConfig


def seed_store(session_factory) -> None:
    """Small catalog: two departments, three categories, four products."""
    with session_factory() as session:
        session.add_all(
            [
                Department(department_id=1, name="Regional", description="Proud of your country?"),
                Department(department_id=2, name="Nature", description="Find beautiful animals"),
                Category(category_id=1, department_id=1, name="French", description="The French have always had an eye"),
                Category(category_id=2, department_id=1, name="Italian", description="The full and resplendent treasure chest"),
                Category(category_id=3, department_id=2, name="Animal", description="Our ever-growing selection"),
                Product(product_id=1, name="Arc d'Triomphe", description="This beautiful and iconic T-shirt", price=Decimal("10.00"), discounted_price=Decimal("0.00"), image="arc-d-triomphe.gif", thumbnail="arc-d-triomphe-thumbnail.gif"),
                Product(product_id=2, name="Chartres Cathedral", description="The Fur Merchants stained glass window", price=Decimal("5.50"), discounted_price=Decimal("0.00"), image="chartres-cathedral.gif", thumbnail="chartres-cathedral-thumbnail.gif"),
                Product(product_id=3, name="Coat of Arms", description="There is good reason to wear this shirt", price=Decimal("14.50"), discounted_price=Decimal("12.95"), image="coat-of-arms.gif", thumbnail="coat-of-arms-thumbnail.gif"),
                Product(product_id=4, name="Gecko", description="A lizard with sticky feet and a bright green shirt", price=Decimal("0.10"), discounted_price=Decimal("0.00"), image="gecko.gif", thumbnail="gecko-thumbnail.gif"),
                ProductCategory(product_id=1, category_id=1),
                ProductCategory(product_id=2, category_id=1),
                ProductCategory(product_id=3, category_id=2),
                ProductCategory(product_id=4, category_id=3),
                Attribute(attribute_id=1, name="Size"),
                Attribute(attribute_id=2, name="Color"),
                AttributeValue(attribute_value_id=1, attribute_id=1, value="S"),
                AttributeValue(attribute_value_id=2, attribute_id=1, value="M"),
                AttributeValue(attribute_value_id=3, attribute_id=2, value="White"),
                ProductAttribute(product_id=1, attribute_value_id=1),
                ProductAttribute(product_id=1, attribute_value_id=3),
                ShippingRegion(shipping_region_id=1, shipping_region="Please Select"),
                ShippingRegion(shipping_region_id=2, shipping_region="US / Canada"),
                Shipping(shipping_id=1, shipping_type="Next Day Delivery ($20)", shipping_cost=Decimal("20.00"), shipping_region_id=2),
                Shipping(shipping_id=2, shipping_type="3-4 Days ($10)", shipping_cost=Decimal("10.00"), shipping_region_id=2),
                Tax(tax_id=1, tax_type="Sales Tax at 8.5%", tax_percentage=Decimal("8.50")),
                Tax(tax_id=2, tax_type="No Tax", tax_percentage=Decimal("0.00")),
            ]
        )


@pytest.fixture()
def session_factory():
    engine = db.configure_engine("sqlite://")
    db.init_db()
    seed_store(db.get_session)
    yield db.get_session
    engine.dispose()


@pytest.fixture()
def config():
    return AppConfig(
        database_url="sqlite://",
        jwt_key="test-secret",
        token_expiry="24h",
        token_ttl_seconds=86400,
        log_level="WARNING",
        page_size=20,
        max_page_size=100,
        description_length=200,
    )


@pytest.fixture()
def app(config):
    app = create_app(config)
    app.config["TESTING"] = True
    seed_store(db.get_session)
    yield app
    db.engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()
