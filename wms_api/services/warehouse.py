# wms_api/services/warehouse.py
from wms_api.exceptions import InvalidInputError
from wms_api.services.base import CRUDService


class WarehouseService(CRUDService):
    entity = "warehouse"
    key_field = "warehouse_code"

    def validate(self, record) -> None:
        for field in ("address", "telephone", "warehouse_code"):
            if not getattr(record, field):
                raise InvalidInputError(self.entity, field, f"{field} is required")
        if record.minimum_capacity < 0:
            raise InvalidInputError(self.entity, "minimum_capacity", "minimum_capacity cannot be negative")
