# wms_api/schemas/reports.py
from pydantic import BaseModel

# Aggregation projections returned by the report endpoints.
# Counts come from outer joins, so a parent without children reports 0.

class LocalitySellersReport(BaseModel):
    locality_id: int
    locality_name: str
    postal_code: int
    sellers_count: int

class LocalityCarriersReport(BaseModel):
    locality_id: int
    locality_name: str
    carriers_count: int

class ProductRecordsReport(BaseModel):
    product_id: int
    description: str
    records_count: int

class SectionProductsReport(BaseModel):
    section_id: int
    section_number: int
    products_count: int

class BuyerPurchaseOrdersReport(BaseModel):
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    purchase_orders_count: int

class EmployeeInboundOrdersReport(BaseModel):
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int
    inbound_orders_count: int
