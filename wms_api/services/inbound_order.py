# wms_api/services/inbound_order.py
from typing import Optional

from wms_api.services.base import RecordService


class InboundOrderService(RecordService):
    entity = "inbound order"
    key_field = "order_number"
    references = (
        ("employee_id", "employee"),
        ("warehouse_id", "warehouse"),
        ("product_batch_id", "product batch"),
    )

    def report_by_employee(self, employee_id: Optional[int] = None):
        employee_id = self._report_filter("employee_exists", "employee", employee_id)
        return self.repo.report_by_employee(employee_id)
