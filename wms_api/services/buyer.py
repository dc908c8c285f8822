# wms_api/services/buyer.py
from wms_api.services.base import CRUDService


class BuyerService(CRUDService):
    entity = "buyer"
    key_field = "card_number_id"
