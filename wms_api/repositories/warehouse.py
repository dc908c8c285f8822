# wms_api/repositories/warehouse.py
from wms_api.models.warehouse import Warehouse
from wms_api.repositories.base import SQLRepository
from wms_api.schemas.warehouse import WarehouseOut


class WarehouseRepository(SQLRepository):
    model = Warehouse
    schema = WarehouseOut
    entity = "warehouse"
    key_field = "warehouse_code"
