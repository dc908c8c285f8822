# wms_api/models/warehouse.py
from sqlalchemy import Column, Integer, String
from wms_api.database import Base


# Physical warehouse; sections and employees belong to one
class Warehouse(Base):
    __tablename__ = "warehouses"

    id = Column(Integer, primary_key=True, index=True)
    address = Column(String, nullable=False)
    telephone = Column(String, nullable=False)
    warehouse_code = Column(String, unique=True, nullable=False, index=True)
    minimum_capacity = Column(Integer, nullable=False, default=0)
    minimum_temperature = Column(Integer, nullable=False, default=0)
