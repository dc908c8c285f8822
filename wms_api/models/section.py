# wms_api/models/section.py
from sqlalchemy import Column, Integer, ForeignKey
from wms_api.database import Base


# Storage area inside a warehouse holding one product type
class Section(Base):
    __tablename__ = "sections"

    id = Column(Integer, primary_key=True, index=True)
    section_number = Column(Integer, unique=True, nullable=False, index=True)

    # Temperatures in degrees Celsius, capacities in units
    current_temperature = Column(Integer, nullable=False, default=0)
    minimum_temperature = Column(Integer, nullable=False, default=0)
    current_capacity = Column(Integer, nullable=False, default=0)
    minimum_capacity = Column(Integer, nullable=False, default=0)
    maximum_capacity = Column(Integer, nullable=False, default=0)

    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False, index=True)
    product_type_id = Column(Integer, nullable=False)
