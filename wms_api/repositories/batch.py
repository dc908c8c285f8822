# wms_api/repositories/batch.py
from wms_api.models.batch import ProductBatch
from wms_api.models.product import Product
from wms_api.models.section import Section
from wms_api.repositories.base import SQLRepository
from wms_api.schemas.batch import ProductBatchOut


class ProductBatchRepository(SQLRepository):
    model = ProductBatch
    schema = ProductBatchOut
    entity = "product batch"
    key_field = "batch_number"

    def product_exists(self, product_id: int) -> bool:
        return self._probe(Product.id, product_id)

    def section_exists(self, section_id: int) -> bool:
        return self._probe(Section.id, section_id)
