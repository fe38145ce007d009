from typing import Dict, List
from ..db.session import get_session, translate_errors
from ..errors import NotFoundError
from ..models.attribute import Attribute, AttributeValue, ProductAttribute
from ..models.product import Product


class AttributeService:
    """Product attribute lookups (Size, Color and their values)."""

    def __init__(self, session_factory=get_session):
        self._session_factory = session_factory

    def list_attributes(self) -> List[Dict]:
        with translate_errors("attribute.list_attributes"), self._session_factory() as session:
            rows = session.query(Attribute).order_by(Attribute.attribute_id).all()
            return [{"attribute_id": a.attribute_id, "name": a.name} for a in rows]

    def get_attribute(self, attribute_id: int) -> Dict:
        with translate_errors("attribute.get_attribute"), self._session_factory() as session:
            a = session.get(Attribute, attribute_id)
            if not a:
                raise NotFoundError(f"Attribute {attribute_id} does not exist", code="ATR_01", field="attribute_id")
            return {"attribute_id": a.attribute_id, "name": a.name}

    def attribute_values(self, attribute_id: int) -> List[Dict]:
        with translate_errors("attribute.attribute_values"), self._session_factory() as session:
            if session.get(Attribute, attribute_id) is None:
                raise NotFoundError(f"Attribute {attribute_id} does not exist", code="ATR_01", field="attribute_id")
            rows = (
                session.query(AttributeValue)
                .filter(AttributeValue.attribute_id == attribute_id)
                .order_by(AttributeValue.attribute_value_id)
                .all()
            )
            return [{"attribute_value_id": v.attribute_value_id, "value": v.value} for v in rows]

    def product_attributes(self, product_id: int) -> List[Dict]:
        with translate_errors("attribute.product_attributes"), self._session_factory() as session:
            if session.get(Product, product_id) is None:
                raise NotFoundError(f"Product {product_id} does not exist", code="PRO_01", field="product_id")
            rows = (
                session.query(Attribute.name, AttributeValue.attribute_value_id, AttributeValue.value)
                .join(AttributeValue, AttributeValue.attribute_id == Attribute.attribute_id)
                .join(ProductAttribute, ProductAttribute.attribute_value_id == AttributeValue.attribute_value_id)
                .filter(ProductAttribute.product_id == product_id)
                .order_by(AttributeValue.attribute_value_id)
                .all()
            )
            return [
                {"attribute_name": name, "attribute_value_id": value_id, "attribute_value": value}
                for name, value_id, value in rows
            ]
