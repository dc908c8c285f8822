# wms_api/repositories/section.py
from typing import List, Optional

from sqlalchemy import func

from wms_api.exceptions import NotFoundError
from wms_api.models.batch import ProductBatch
from wms_api.models.section import Section
from wms_api.models.warehouse import Warehouse
from wms_api.repositories.base import SQLRepository
from wms_api.schemas.reports import SectionProductsReport
from wms_api.schemas.section import SectionOut


class SectionRepository(SQLRepository):
    model = Section
    schema = SectionOut
    entity = "section"
    key_field = "section_number"

    def warehouse_exists(self, warehouse_id: int) -> bool:
        return self._probe(Warehouse.id, warehouse_id)

    def section_exists(self, section_id: int) -> bool:
        return self._probe(Section.id, section_id)

    def delete(self, id: int) -> None:
        """Remove the section together with the product batches stored in it.

        Both deletes share one commit; if the section row is gone the batch
        delete is rolled back as well.
        """
        with self._transaction("delete"):
            self.db.query(ProductBatch).filter(ProductBatch.section_id == id).delete(
                synchronize_session=False
            )
            affected = self.db.query(Section).filter(Section.id == id).delete(
                synchronize_session=False
            )
            if affected < 1:
                raise NotFoundError(self.entity, id)

    def report_products(self, section_id: Optional[int] = None) -> List[SectionProductsReport]:
        # products_count is the stock on hand: sum of batch current_quantity
        q = (
            self.db.query(
                Section.id.label("section_id"),
                Section.section_number,
                func.coalesce(func.sum(ProductBatch.current_quantity), 0).label("products_count"),
            )
            .outerjoin(ProductBatch, ProductBatch.section_id == Section.id)
        )
        if section_id is not None:
            q = q.filter(Section.id == section_id)
        q = q.group_by(Section.id, Section.section_number).order_by(Section.id)

        rows = self._fetch(q, "report_products")
        return [SectionProductsReport.model_validate(r, from_attributes=True) for r in rows]
