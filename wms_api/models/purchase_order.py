# wms_api/models/purchase_order.py
from sqlalchemy import Column, Integer, String, Date, ForeignKey
from wms_api.database import Base


# Order placed by a buyer against a product record (price snapshot)
class PurchaseOrder(Base):
    __tablename__ = "purchase_orders"

    id = Column(Integer, primary_key=True, index=True)
    order_number = Column(String, unique=True, nullable=False, index=True)
    order_date = Column(Date, nullable=False)
    tracking_code = Column(String)

    buyer_id = Column(Integer, ForeignKey("buyers.id"), nullable=False, index=True)
    product_record_id = Column(Integer, ForeignKey("product_records.id"), nullable=False)
    # Status is a bare code, no status table
    order_status_id = Column(Integer, nullable=False, default=1)
