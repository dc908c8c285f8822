# wms_api/models/inbound_order.py
from sqlalchemy import Column, Integer, String, Date, ForeignKey
from wms_api.database import Base


# Goods received into a warehouse, registered by an employee
class InboundOrder(Base):
    __tablename__ = "inbound_orders"

    id = Column(Integer, primary_key=True, index=True)
    order_date = Column(Date, nullable=False)
    order_number = Column(String, unique=True, nullable=False, index=True)

    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    product_batch_id = Column(Integer, ForeignKey("product_batches.id"), nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)
