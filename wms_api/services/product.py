# wms_api/services/product.py
import logging
from typing import Optional

from wms_api.schemas.product import ProductRecordCreate
from wms_api.services.base import CRUDService

logger = logging.getLogger(__name__)


class ProductService(CRUDService):
    """Product catalogue plus its price history (product records)."""

    entity = "product"
    key_field = "product_code"
    references = (("seller_id", "seller"),)

    def create_record(self, record: ProductRecordCreate) -> int:
        self._require_reference("product_id", "product", record.product_id)
        new_id = self.repo.save_record(record)
        logger.info("product record created (id=%s, product=%s)", new_id, record.product_id)
        return new_id

    def get_record(self, id: int):
        return self.repo.get_record(id)

    def report_records(self, product_id: Optional[int] = None):
        product_id = self._report_filter("product_exists", "product", product_id)
        return self.repo.report_records(product_id)
