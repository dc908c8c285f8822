# wms_api/models/product.py
from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey
from wms_api.database import Base

# Model Product
# Catalog entry sold by a seller. Dimensions and rates are plain floats;
# product_type_id is a bare classification number with no table behind it.
class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String, nullable=False)
    expiration_rate = Column(Float, nullable=False, default=0)
    freezing_rate = Column(Float, nullable=False, default=0)
    height = Column(Float, nullable=False, default=0)
    length = Column(Float, nullable=False, default=0)
    netweight = Column(Float, nullable=False, default=0)
    product_code = Column(String, unique=True, nullable=False, index=True)
    recommended_freezing_temperature = Column(Float, nullable=False, default=0)
    width = Column(Float, nullable=False, default=0)

    product_type_id = Column(Integer, nullable=False)
    seller_id = Column(Integer, ForeignKey("sellers.id"), nullable=False)


# Price history entry for a product (one row per price change)
class ProductRecord(Base):
    __tablename__ = "product_records"

    id = Column(Integer, primary_key=True, index=True)
    last_update_date = Column(Date, nullable=False)
    purchase_price = Column(Float, nullable=False)
    sale_price = Column(Float, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
