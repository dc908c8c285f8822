# wms_api/services/locality.py
from typing import Optional

from wms_api.services.base import CRUDService


class LocalityService(CRUDService):
    entity = "locality"
    key_field = "postal_code"

    def report_sellers(self, locality_id: Optional[int] = None):
        locality_id = self._report_filter("locality_exists", "locality", locality_id)
        return self.repo.report_sellers(locality_id)
