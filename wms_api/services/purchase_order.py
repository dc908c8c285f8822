# wms_api/services/purchase_order.py
from typing import Optional

from wms_api.services.base import RecordService


class PurchaseOrderService(RecordService):
    entity = "purchase order"
    key_field = "order_number"
    references = (("buyer_id", "buyer"), ("product_record_id", "product record"))

    def run_checks(self, record) -> None:
        # A repeated order number is reported before any missing reference
        self._require_free_key(record.order_number)
        for field, entity in self.references:
            self._require_reference(field, entity, getattr(record, field))

    def report_by_buyer(self, buyer_id: Optional[int] = None):
        buyer_id = self._report_filter("buyer_exists", "buyer", buyer_id)
        return self.repo.report_by_buyer(buyer_id)
