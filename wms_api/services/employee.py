# wms_api/services/employee.py
from wms_api.services.base import CRUDService


class EmployeeService(CRUDService):
    entity = "employee"
    key_field = "card_number_id"
    references = (("warehouse_id", "warehouse"),)
