# wms_api/schemas/warehouse.py
from typing import Optional

from wms_api.schemas.base import ORMBase


# Field contents are checked by the service (empty strings, negative capacity)
class WarehouseBase(ORMBase):
    address: str
    telephone: str
    warehouse_code: str
    minimum_capacity: int = 0
    minimum_temperature: int = 0


class WarehouseCreate(WarehouseBase):
    pass


class WarehouseUpdate(ORMBase):
    address: Optional[str] = None
    telephone: Optional[str] = None
    warehouse_code: Optional[str] = None
    minimum_capacity: Optional[int] = None
    minimum_temperature: Optional[int] = None


class WarehouseOut(WarehouseBase):
    id: int
