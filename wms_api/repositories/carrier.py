# wms_api/repositories/carrier.py
from typing import List, Optional

from sqlalchemy import func

from wms_api.models.carrier import Carrier
from wms_api.models.locality import Locality
from wms_api.repositories.base import SQLRepository
from wms_api.schemas.carrier import CarrierOut
from wms_api.schemas.reports import LocalityCarriersReport


class CarrierRepository(SQLRepository):
    model = Carrier
    schema = CarrierOut
    entity = "carrier"
    key_field = "cid"

    def locality_exists(self, locality_id: int) -> bool:
        return self._probe(Locality.id, locality_id)

    def report_by_locality(self, locality_id: Optional[int] = None) -> List[LocalityCarriersReport]:
        q = (
            self.db.query(
                Locality.id.label("locality_id"),
                Locality.locality_name,
                func.count(Carrier.id).label("carriers_count"),
            )
            .outerjoin(Carrier, Carrier.locality_id == Locality.id)
        )
        if locality_id is not None:
            q = q.filter(Locality.id == locality_id)
        q = q.group_by(Locality.id, Locality.locality_name).order_by(Locality.id)

        rows = self._fetch(q, "report_by_locality")
        return [LocalityCarriersReport.model_validate(r, from_attributes=True) for r in rows]
