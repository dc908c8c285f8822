# wms_api/schemas/section.py
from typing import Optional

from pydantic import Field

from wms_api.schemas.base import ORMBase


class SectionBase(ORMBase):
    section_number: int
    current_temperature: int = 0
    minimum_temperature: int = 0
    current_capacity: int = Field(default=0, ge=0)
    minimum_capacity: int = Field(default=0, ge=0)
    maximum_capacity: int = Field(default=0, ge=0)
    warehouse_id: int = Field(gt=0)
    product_type_id: int = Field(gt=0)


class SectionCreate(SectionBase):
    pass


class SectionUpdate(ORMBase):
    section_number: Optional[int] = None
    current_temperature: Optional[int] = None
    minimum_temperature: Optional[int] = None
    current_capacity: Optional[int] = Field(None, ge=0)
    minimum_capacity: Optional[int] = Field(None, ge=0)
    maximum_capacity: Optional[int] = Field(None, ge=0)
    warehouse_id: Optional[int] = Field(None, gt=0)
    product_type_id: Optional[int] = Field(None, gt=0)


class SectionOut(SectionBase):
    id: int
