# wms_api/services/batch.py
from wms_api.services.base import RecordService


class ProductBatchService(RecordService):
    entity = "product batch"
    key_field = "batch_number"
    references = (("product_id", "product"), ("section_id", "section"))
