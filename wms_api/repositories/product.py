# wms_api/repositories/product.py
from typing import List, Optional

from sqlalchemy import func

from wms_api.exceptions import NotFoundError
from wms_api.models.product import Product, ProductRecord
from wms_api.models.seller import Seller
from wms_api.repositories.base import SQLRepository
from wms_api.schemas.product import ProductOut, ProductRecordCreate, ProductRecordOut
from wms_api.schemas.reports import ProductRecordsReport


class ProductRepository(SQLRepository):
    model = Product
    schema = ProductOut
    entity = "product"
    key_field = "product_code"

    def seller_exists(self, seller_id: int) -> bool:
        return self._probe(Seller.id, seller_id)

    def product_exists(self, product_id: int) -> bool:
        return self._probe(Product.id, product_id)

    # ---- PRODUCT RECORDS (price history) ----
    def save_record(self, record: ProductRecordCreate) -> int:
        row = ProductRecord(**record.model_dump())
        with self._transaction("save_record"):
            self.db.add(row)
            self.db.flush()
            new_id = row.id
        return new_id

    def get_record(self, id: int) -> ProductRecordOut:
        rows = self._fetch(self.db.query(ProductRecord).filter(ProductRecord.id == id), "get_record")
        if not rows:
            raise NotFoundError("product record", id)
        return ProductRecordOut.model_validate(rows[0])

    def report_records(self, product_id: Optional[int] = None) -> List[ProductRecordsReport]:
        q = (
            self.db.query(
                Product.id.label("product_id"),
                Product.description,
                func.count(ProductRecord.id).label("records_count"),
            )
            .outerjoin(ProductRecord, ProductRecord.product_id == Product.id)
        )
        if product_id is not None:
            q = q.filter(Product.id == product_id)
        q = q.group_by(Product.id, Product.description).order_by(Product.id)

        rows = self._fetch(q, "report_records")
        return [ProductRecordsReport.model_validate(r, from_attributes=True) for r in rows]
