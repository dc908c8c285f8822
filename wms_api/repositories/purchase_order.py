# wms_api/repositories/purchase_order.py
from typing import List, Optional

from sqlalchemy import func

from wms_api.models.buyer import Buyer
from wms_api.models.product import ProductRecord
from wms_api.models.purchase_order import PurchaseOrder
from wms_api.repositories.base import SQLRepository
from wms_api.schemas.purchase_order import PurchaseOrderOut
from wms_api.schemas.reports import BuyerPurchaseOrdersReport


class PurchaseOrderRepository(SQLRepository):
    model = PurchaseOrder
    schema = PurchaseOrderOut
    entity = "purchase order"
    key_field = "order_number"

    def buyer_exists(self, buyer_id: int) -> bool:
        return self._probe(Buyer.id, buyer_id)

    def product_record_exists(self, product_record_id: int) -> bool:
        return self._probe(ProductRecord.id, product_record_id)

    def report_by_buyer(self, buyer_id: Optional[int] = None) -> List[BuyerPurchaseOrdersReport]:
        q = (
            self.db.query(
                Buyer.id,
                Buyer.card_number_id,
                Buyer.first_name,
                Buyer.last_name,
                func.count(PurchaseOrder.id).label("purchase_orders_count"),
            )
            .outerjoin(PurchaseOrder, PurchaseOrder.buyer_id == Buyer.id)
        )
        if buyer_id is not None:
            q = q.filter(Buyer.id == buyer_id)
        q = q.group_by(Buyer.id, Buyer.card_number_id, Buyer.first_name, Buyer.last_name).order_by(Buyer.id)

        rows = self._fetch(q, "report_by_buyer")
        return [BuyerPurchaseOrdersReport.model_validate(r, from_attributes=True) for r in rows]
