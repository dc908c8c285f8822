# wms_api/services/carrier.py
from typing import Optional

from wms_api.exceptions import InvalidInputError
from wms_api.services.base import CRUDService


class CarrierService(CRUDService):
    entity = "carrier"
    key_field = "cid"
    references = (("locality_id", "locality"),)

    def validate(self, record) -> None:
        for field in ("cid", "company_name", "address", "telephone"):
            if not getattr(record, field):
                raise InvalidInputError(self.entity, field, f"{field} is required")
        if record.locality_id < 0:
            raise InvalidInputError(self.entity, "locality_id", "locality_id cannot be negative")

    def report_by_locality(self, locality_id: Optional[int] = None):
        locality_id = self._report_filter("locality_exists", "locality", locality_id)
        return self.repo.report_by_locality(locality_id)
