# wms_api/models/carrier.py
from sqlalchemy import Column, Integer, String, ForeignKey
from wms_api.database import Base


# Transport company operating from a locality
class Carrier(Base):
    __tablename__ = "carriers"

    id = Column(Integer, primary_key=True, index=True)
    cid = Column(String, unique=True, nullable=False, index=True)
    company_name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    telephone = Column(String, nullable=False)
    locality_id = Column(Integer, ForeignKey("localities.id"), nullable=False, index=True)
