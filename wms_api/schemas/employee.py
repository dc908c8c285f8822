# wms_api/schemas/employee.py
from typing import Optional

from pydantic import Field

from wms_api.schemas.base import ORMBase


class EmployeeBase(ORMBase):
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int = Field(gt=0)


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(ORMBase):
    card_number_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    warehouse_id: Optional[int] = Field(None, gt=0)


class EmployeeOut(EmployeeBase):
    id: int
