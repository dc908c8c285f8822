# wms_api/schemas/seller.py
from typing import Optional

from pydantic import Field

from wms_api.schemas.base import ORMBase


class SellerBase(ORMBase):
    cid: int
    company_name: str
    address: Optional[str] = None
    telephone: Optional[str] = None
    locality_id: int = Field(gt=0)


class SellerCreate(SellerBase):
    pass


class SellerUpdate(ORMBase):
    cid: Optional[int] = None
    company_name: Optional[str] = None
    address: Optional[str] = None
    telephone: Optional[str] = None
    locality_id: Optional[int] = Field(default=None, gt=0)


class SellerOut(SellerBase):
    id: int
