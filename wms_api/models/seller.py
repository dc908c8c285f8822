# wms_api/models/seller.py
from sqlalchemy import Column, Integer, String, ForeignKey
from wms_api.database import Base


# Company supplying products to the warehouse network
class Seller(Base):
    __tablename__ = "sellers"

    id = Column(Integer, primary_key=True, index=True)
    cid = Column(Integer, unique=True, nullable=False, index=True)
    company_name = Column(String, nullable=False)
    address = Column(String)
    telephone = Column(String)
    locality_id = Column(Integer, ForeignKey("localities.id"), nullable=False)
