# wms_api/schemas/buyer.py
from typing import Optional

from wms_api.schemas.base import ORMBase


class BuyerBase(ORMBase):
    card_number_id: str
    first_name: str
    last_name: str


class BuyerCreate(BuyerBase):
    pass


class BuyerUpdate(ORMBase):
    card_number_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class BuyerOut(BuyerBase):
    id: int
