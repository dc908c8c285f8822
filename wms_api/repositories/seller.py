# wms_api/repositories/seller.py
from wms_api.models.locality import Locality
from wms_api.models.seller import Seller
from wms_api.repositories.base import SQLRepository
from wms_api.schemas.seller import SellerOut


class SellerRepository(SQLRepository):
    model = Seller
    schema = SellerOut
    entity = "seller"
    key_field = "cid"

    def locality_exists(self, locality_id: int) -> bool:
        return self._probe(Locality.id, locality_id)
