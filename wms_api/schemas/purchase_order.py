# wms_api/schemas/purchase_order.py
from datetime import date
from typing import Optional

from pydantic import Field

from wms_api.schemas.base import ORMBase


class PurchaseOrderBase(ORMBase):
    order_number: str
    order_date: date
    tracking_code: Optional[str] = None
    buyer_id: int
    product_record_id: int
    order_status_id: int = Field(default=1, gt=0)


class PurchaseOrderCreate(PurchaseOrderBase):
    pass


class PurchaseOrderOut(PurchaseOrderBase):
    id: int
