import pytest

from storefront.common.errors import NotFoundError, ValidationError
from storefront.common.services import AttributeService, CatalogService, ShippingService, TaxService


@pytest.fixture()
def catalog(session_factory):
    return CatalogService(session_factory, page_size=2, description_length=10)


class TestProducts:
    def test_list_is_paginated(self, catalog):
        first = catalog.list_products()
        assert first["count"] == 4
        assert [p["product_id"] for p in first["rows"]] == [1, 2]
        assert first["paginationMeta"]["totalPages"] == 2
        second = catalog.list_products(page=2)
        assert [p["product_id"] for p in second["rows"]] == [3, 4]

    def test_descriptions_are_truncated(self, catalog):
        rows = catalog.list_products(limit=1, description_length=4)["rows"]
        assert rows[0]["description"] == "This"
        assert len(catalog.list_products(limit=1)["rows"][0]["description"]) == 10

    def test_limit_is_capped(self, session_factory):
        catalog = CatalogService(session_factory, max_page_size=3)
        assert len(catalog.list_products(limit=50)["rows"]) == 3

    def test_search_all_words(self, catalog):
        result = catalog.search_products(query_string="beautiful iconic", all_words=True)
        assert [p["product_id"] for p in result["rows"]] == [1]

    def test_search_any_word(self, catalog):
        result = catalog.search_products(query_string="iconic lizard", all_words=False, limit=10)
        assert [p["product_id"] for p in result["rows"]] == [1, 4]

    def test_search_is_case_insensitive(self, catalog):
        assert catalog.search_products(query_string="GECKO")["count"] == 1

    def test_search_requires_words(self, catalog):
        with pytest.raises(ValidationError):
            catalog.search_products(query_string="   ")

    def test_products_in_category(self, catalog):
        result = catalog.products_in_category(1)
        assert [p["product_id"] for p in result["rows"]] == [1, 2]
        with pytest.raises(NotFoundError):
            catalog.products_in_category(99)

    def test_products_in_department(self, catalog):
        result = catalog.products_in_department(1, limit=10)
        assert [p["product_id"] for p in result["rows"]] == [1, 2, 3]
        assert catalog.products_in_department(2)["count"] == 1
        with pytest.raises(NotFoundError):
            catalog.products_in_department(99)

    def test_get_product(self, catalog):
        product = catalog.get_product(3)
        assert product["name"] == "Coat of Arms"
        assert product["price"] == "14.50"
        assert product["discounted_price"] == "12.95"
        assert product["description"] == "There is good reason to wear this shirt"
        with pytest.raises(NotFoundError) as exc:
            catalog.get_product(99)
        assert exc.value.code == "PRO_01"


class TestDepartmentsAndCategories:
    def test_departments(self, catalog):
        assert [d["name"] for d in catalog.list_departments()] == ["Regional", "Nature"]
        assert catalog.get_department(2)["name"] == "Nature"
        with pytest.raises(NotFoundError):
            catalog.get_department(99)

    def test_categories_ordering(self, catalog):
        result = catalog.list_categories(order="name", limit=10)
        assert result["count"] == 3
        assert [c["name"] for c in result["rows"]] == ["Animal", "French", "Italian"]

    def test_categories_rejects_unknown_order(self, catalog):
        with pytest.raises(ValidationError) as exc:
            catalog.list_categories(order="password")
        assert exc.value.code == "PAG_02"

    def test_category_lookups(self, catalog):
        assert catalog.get_category(3)["department_id"] == 2
        assert [c["category_id"] for c in catalog.categories_in_department(1)] == [1, 2]
        assert catalog.categories_of_product(4) == [{"category_id": 3, "department_id": 2, "name": "Animal"}]
        with pytest.raises(NotFoundError):
            catalog.get_category(99)
        with pytest.raises(NotFoundError):
            catalog.categories_of_product(99)


class TestAttributes:
    def test_attributes(self, session_factory):
        attributes = AttributeService(session_factory)
        assert [a["name"] for a in attributes.list_attributes()] == ["Size", "Color"]
        assert attributes.get_attribute(1) == {"attribute_id": 1, "name": "Size"}
        assert [v["value"] for v in attributes.attribute_values(1)] == ["S", "M"]
        with pytest.raises(NotFoundError):
            attributes.get_attribute(99)

    def test_product_attributes(self, session_factory):
        attributes = AttributeService(session_factory)
        assert attributes.product_attributes(1) == [
            {"attribute_name": "Size", "attribute_value_id": 1, "attribute_value": "S"},
            {"attribute_name": "Color", "attribute_value_id": 3, "attribute_value": "White"},
        ]
        assert attributes.product_attributes(2) == []


class TestShippingAndTax:
    def test_shipping(self, session_factory):
        shipping = ShippingService(session_factory)
        assert len(shipping.list_regions()) == 2
        options = shipping.shipping_options(2)
        assert [o["shipping_cost"] for o in options] == ["20.00", "10.00"]
        assert shipping.shipping_options(1) == []
        with pytest.raises(NotFoundError):
            shipping.shipping_options(99)

    def test_tax(self, session_factory):
        taxes = TaxService(session_factory)
        assert [t["tax_id"] for t in taxes.list_taxes()] == [1, 2]
        assert taxes.get_tax(1)["tax_percentage"] == "8.50"
        with pytest.raises(NotFoundError):
            taxes.get_tax(99)
