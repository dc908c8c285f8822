# wms_api/repositories/inbound_order.py
from typing import List, Optional

from sqlalchemy import func

from wms_api.models.batch import ProductBatch
from wms_api.models.employee import Employee
from wms_api.models.inbound_order import InboundOrder
from wms_api.models.warehouse import Warehouse
from wms_api.repositories.base import SQLRepository
from wms_api.schemas.inbound_order import InboundOrderOut
from wms_api.schemas.reports import EmployeeInboundOrdersReport


class InboundOrderRepository(SQLRepository):
    model = InboundOrder
    schema = InboundOrderOut
    entity = "inbound order"
    key_field = "order_number"

    def employee_exists(self, employee_id: int) -> bool:
        return self._probe(Employee.id, employee_id)

    def warehouse_exists(self, warehouse_id: int) -> bool:
        return self._probe(Warehouse.id, warehouse_id)

    def product_batch_exists(self, product_batch_id: int) -> bool:
        return self._probe(ProductBatch.id, product_batch_id)

    def report_by_employee(self, employee_id: Optional[int] = None) -> List[EmployeeInboundOrdersReport]:
        q = (
            self.db.query(
                Employee.id,
                Employee.card_number_id,
                Employee.first_name,
                Employee.last_name,
                Employee.warehouse_id,
                func.count(InboundOrder.id).label("inbound_orders_count"),
            )
            .outerjoin(InboundOrder, InboundOrder.employee_id == Employee.id)
        )
        if employee_id is not None:
            q = q.filter(Employee.id == employee_id)
        q = q.group_by(
            Employee.id, Employee.card_number_id, Employee.first_name,
            Employee.last_name, Employee.warehouse_id,
        ).order_by(Employee.id)

        rows = self._fetch(q, "report_by_employee")
        return [EmployeeInboundOrdersReport.model_validate(r, from_attributes=True) for r in rows]
