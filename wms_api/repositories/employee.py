# wms_api/repositories/employee.py
from wms_api.models.employee import Employee
from wms_api.models.warehouse import Warehouse
from wms_api.repositories.base import SQLRepository
from wms_api.schemas.employee import EmployeeOut


class EmployeeRepository(SQLRepository):
    model = Employee
    schema = EmployeeOut
    entity = "employee"
    key_field = "card_number_id"

    def warehouse_exists(self, warehouse_id: int) -> bool:
        return self._probe(Warehouse.id, warehouse_id)
