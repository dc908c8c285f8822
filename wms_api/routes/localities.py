# wms_api/routes/localities.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.orm import Session

from wms_api.database import get_db
from wms_api.repositories.carrier import CarrierRepository
from wms_api.repositories.locality import LocalityRepository
from wms_api.schemas.locality import LocalityCreate, LocalityOut, LocalityUpdate
from wms_api.schemas.reports import LocalityCarriersReport, LocalitySellersReport
from wms_api.services.carrier import CarrierService
from wms_api.services.locality import LocalityService
from wms_api.utils.audit import client_ip, write_log

router = APIRouter(prefix="/localities", tags=["Localities"])


def get_service(db: Session = Depends(get_db)) -> LocalityService:
    return LocalityService(LocalityRepository(db))


def get_carrier_service(db: Session = Depends(get_db)) -> CarrierService:
    return CarrierService(CarrierRepository(db))


# =========================
# REPORTS (before /{locality_id})
# =========================
@router.get("/report-sellers", response_model=List[LocalitySellersReport])
def report_sellers(
    id: Optional[int] = Query(None, description="Only this locality"),
    service: LocalityService = Depends(get_service),
):
    return service.report_sellers(id)


@router.get("/report-carriers", response_model=List[LocalityCarriersReport])
def report_carriers(
    id: Optional[int] = Query(None, description="Only this locality"),
    service: CarrierService = Depends(get_carrier_service),
):
    return service.report_by_locality(id)


# =========================
# CRUD
# =========================
@router.get("", response_model=List[LocalityOut])
def list_localities(service: LocalityService = Depends(get_service)):
    return service.get_all()


@router.get("/{locality_id}", response_model=LocalityOut)
def get_locality(locality_id: int, service: LocalityService = Depends(get_service)):
    return service.get(locality_id)


@router.post("", response_model=LocalityOut, status_code=201)
def create_locality(
    payload: LocalityCreate, request: Request,
    db: Session = Depends(get_db), service: LocalityService = Depends(get_service),
):
    new_id = service.save(payload)
    write_log(
        db, action="LOCALITY_CREATE", resource="localities",
        ip=client_ip(request), meta={"id": new_id, "postal_code": payload.postal_code}
    )
    return LocalityOut(id=new_id, **payload.model_dump())


@router.patch("/{locality_id}", response_model=LocalityOut)
def update_locality(
    locality_id: int, changes: LocalityUpdate, request: Request,
    db: Session = Depends(get_db), service: LocalityService = Depends(get_service),
):
    updated = service.update(locality_id, changes)
    write_log(db, action="LOCALITY_UPDATE", resource="localities", ip=client_ip(request), meta={"id": locality_id})
    return updated


@router.delete("/{locality_id}", status_code=204)
def delete_locality(
    locality_id: int, request: Request,
    db: Session = Depends(get_db), service: LocalityService = Depends(get_service),
):
    service.delete(locality_id)
    write_log(db, action="LOCALITY_DELETE", resource="localities", ip=client_ip(request), meta={"id": locality_id})
    return Response(status_code=204)
