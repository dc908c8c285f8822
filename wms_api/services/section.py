# wms_api/services/section.py
from typing import Optional

from wms_api.services.base import CRUDService


class SectionService(CRUDService):
    """Sections; deleting one also removes its product batches."""

    entity = "section"
    key_field = "section_number"
    references = (("warehouse_id", "warehouse"),)

    def report_products(self, section_id: Optional[int] = None):
        section_id = self._report_filter("section_exists", "section", section_id)
        return self.repo.report_products(section_id)
