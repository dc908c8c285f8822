# wms_api/schemas/carrier.py
from typing import Optional

from wms_api.schemas.base import ORMBase


# Field contents are checked by the service (empty strings, negative locality)
class CarrierBase(ORMBase):
    cid: str
    company_name: str
    address: str
    telephone: str
    locality_id: int


class CarrierCreate(CarrierBase):
    pass


class CarrierUpdate(ORMBase):
    cid: Optional[str] = None
    company_name: Optional[str] = None
    address: Optional[str] = None
    telephone: Optional[str] = None
    locality_id: Optional[int] = None


class CarrierOut(CarrierBase):
    id: int
