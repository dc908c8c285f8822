# wms_api/models/batch.py
from sqlalchemy import Column, Integer, Date, ForeignKey
from wms_api.database import Base


# A lot of one product stored in one section
class ProductBatch(Base):
    __tablename__ = "product_batches"

    id = Column(Integer, primary_key=True, index=True)
    batch_number = Column(Integer, unique=True, nullable=False, index=True)

    # Quantities in units
    current_quantity = Column(Integer, nullable=False, default=0)
    initial_quantity = Column(Integer, nullable=False, default=0)

    current_temperature = Column(Integer, nullable=False, default=0)
    minimum_temperature = Column(Integer, nullable=False, default=0)

    due_date = Column(Date, nullable=False)
    manufacturing_date = Column(Date, nullable=False)
    manufacturing_hour = Column(Integer, nullable=False, default=0)

    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False, index=True)
