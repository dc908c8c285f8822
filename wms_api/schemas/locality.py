# wms_api/schemas/locality.py
from typing import Optional

from wms_api.schemas.base import ORMBase


class LocalityBase(ORMBase):
    postal_code: int
    locality_name: str
    province_name: Optional[str] = None
    country_name: Optional[str] = None


class LocalityCreate(LocalityBase):
    pass


# PATCH payload - all fields optional
class LocalityUpdate(ORMBase):
    postal_code: Optional[int] = None
    locality_name: Optional[str] = None
    province_name: Optional[str] = None
    country_name: Optional[str] = None


class LocalityOut(LocalityBase):
    id: int
