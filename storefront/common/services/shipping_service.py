from typing import Dict, List
from ..db.session import get_session, translate_errors
from ..errors import NotFoundError
from ..models.shipping import Shipping, ShippingRegion
from ..models.tax import Tax
from ..utils.dto import money


class ShippingService:
    def __init__(self, session_factory=get_session):
        self._session_factory = session_factory

    def list_regions(self) -> List[Dict]:
        with translate_errors("shipping.list_regions"), self._session_factory() as session:
            rows = session.query(ShippingRegion).order_by(ShippingRegion.shipping_region_id).all()
            return [{"shipping_region_id": r.shipping_region_id, "shipping_region": r.shipping_region} for r in rows]

    def shipping_options(self, shipping_region_id: int) -> List[Dict]:
        with translate_errors("shipping.shipping_options"), self._session_factory() as session:
            if session.get(ShippingRegion, shipping_region_id) is None:
                raise NotFoundError(
                    f"Shipping region {shipping_region_id} does not exist",
                    code="SHP_01",
                    field="shipping_region_id",
                )
            rows = (
                session.query(Shipping)
                .filter(Shipping.shipping_region_id == shipping_region_id)
                .order_by(Shipping.shipping_id)
                .all()
            )
            return [
                {
                    "shipping_id": s.shipping_id,
                    "shipping_type": s.shipping_type,
                    "shipping_cost": money(s.shipping_cost),
                    "shipping_region_id": s.shipping_region_id,
                }
                for s in rows
            ]


class TaxService:
    def __init__(self, session_factory=get_session):
        self._session_factory = session_factory

    @staticmethod
    def _dto(t: Tax) -> Dict:
        return {"tax_id": t.tax_id, "tax_type": t.tax_type, "tax_percentage": money(t.tax_percentage)}

    def list_taxes(self) -> List[Dict]:
        with translate_errors("tax.list_taxes"), self._session_factory() as session:
            return [self._dto(t) for t in session.query(Tax).order_by(Tax.tax_id).all()]

    def get_tax(self, tax_id: int) -> Dict:
        with translate_errors("tax.get_tax"), self._session_factory() as session:
            t = session.get(Tax, tax_id)
            if not t:
                raise NotFoundError(f"Tax {tax_id} does not exist", code="TAX_01", field="tax_id")
            return self._dto(t)
