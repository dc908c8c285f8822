# wms_api/services/seller.py
from wms_api.services.base import CRUDService


class SellerService(CRUDService):
    entity = "seller"
    key_field = "cid"
    references = (("locality_id", "locality"),)
