# wms_api/schemas/product.py
from datetime import date
from typing import Optional

from pydantic import Field

from wms_api.schemas.base import ORMBase


# Shared base attributes for product entities
class ProductBase(ORMBase):
    description: str
    expiration_rate: float = Field(default=0, ge=0)
    freezing_rate: float = Field(default=0, ge=0)
    height: float = Field(default=0, ge=0)
    length: float = Field(default=0, ge=0)
    netweight: float = Field(default=0, ge=0)
    product_code: str
    recommended_freezing_temperature: float = 0
    width: float = Field(default=0, ge=0)
    product_type_id: int = Field(gt=0)
    seller_id: int = Field(gt=0)


class ProductCreate(ProductBase):
    pass


# Schema for partial product updates
class ProductUpdate(ORMBase):
    """Schema for PATCH requests - all fields optional."""
    description: Optional[str] = None
    expiration_rate: Optional[float] = Field(None, ge=0)
    freezing_rate: Optional[float] = Field(None, ge=0)
    height: Optional[float] = Field(None, ge=0)
    length: Optional[float] = Field(None, ge=0)
    netweight: Optional[float] = Field(None, ge=0)
    product_code: Optional[str] = None
    recommended_freezing_temperature: Optional[float] = None
    width: Optional[float] = Field(None, ge=0)
    product_type_id: Optional[int] = Field(None, gt=0)
    seller_id: Optional[int] = Field(None, gt=0)


# Full product representation including ID
class ProductOut(ProductBase):
    id: int


class ProductRecordCreate(ORMBase):
    last_update_date: date
    purchase_price: float = Field(ge=0)
    sale_price: float = Field(ge=0)
    product_id: int


class ProductRecordOut(ProductRecordCreate):
    id: int
