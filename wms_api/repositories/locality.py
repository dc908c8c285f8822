# wms_api/repositories/locality.py
from typing import List, Optional

from sqlalchemy import func

from wms_api.models.locality import Locality
from wms_api.models.seller import Seller
from wms_api.repositories.base import SQLRepository
from wms_api.schemas.locality import LocalityOut
from wms_api.schemas.reports import LocalitySellersReport


class LocalityRepository(SQLRepository):
    model = Locality
    schema = LocalityOut
    entity = "locality"
    key_field = "postal_code"

    def locality_exists(self, locality_id: int) -> bool:
        return self._probe(Locality.id, locality_id)

    def report_sellers(self, locality_id: Optional[int] = None) -> List[LocalitySellersReport]:
        """Number of sellers registered in each locality (0 for none)."""
        q = (
            self.db.query(
                Locality.id.label("locality_id"),
                Locality.locality_name,
                Locality.postal_code,
                func.count(Seller.id).label("sellers_count"),
            )
            .outerjoin(Seller, Seller.locality_id == Locality.id)
        )
        if locality_id is not None:
            q = q.filter(Locality.id == locality_id)
        q = q.group_by(Locality.id, Locality.locality_name, Locality.postal_code).order_by(Locality.id)

        rows = self._fetch(q, "report_sellers")
        return [LocalitySellersReport.model_validate(r, from_attributes=True) for r in rows]
