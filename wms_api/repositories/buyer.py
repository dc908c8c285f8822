# wms_api/repositories/buyer.py
from wms_api.models.buyer import Buyer
from wms_api.repositories.base import SQLRepository
from wms_api.schemas.buyer import BuyerOut


class BuyerRepository(SQLRepository):
    model = Buyer
    schema = BuyerOut
    entity = "buyer"
    key_field = "card_number_id"
