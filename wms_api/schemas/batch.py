# wms_api/schemas/batch.py
from datetime import date

from pydantic import Field

from wms_api.schemas.base import ORMBase


class ProductBatchBase(ORMBase):
    batch_number: int
    current_quantity: int = Field(ge=0)
    current_temperature: int
    due_date: date
    initial_quantity: int = Field(ge=0)
    manufacturing_date: date
    manufacturing_hour: int = Field(ge=0, le=23)
    minimum_temperature: int
    product_id: int
    section_id: int


class ProductBatchCreate(ProductBatchBase):
    pass


class ProductBatchOut(ProductBatchBase):
    id: int
