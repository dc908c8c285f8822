# wms_api/schemas/inbound_order.py
from datetime import date

from wms_api.schemas.base import ORMBase


class InboundOrderBase(ORMBase):
    order_date: date
    order_number: str
    employee_id: int
    product_batch_id: int
    warehouse_id: int


class InboundOrderCreate(InboundOrderBase):
    pass


class InboundOrderOut(InboundOrderBase):
    id: int
