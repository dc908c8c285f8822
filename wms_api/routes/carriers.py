# wms_api/routes/carriers.py
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from wms_api.database import get_db
from wms_api.repositories.carrier import CarrierRepository
from wms_api.schemas.carrier import CarrierCreate, CarrierOut, CarrierUpdate
from wms_api.services.carrier import CarrierService
from wms_api.utils.audit import client_ip, write_log

router = APIRouter(prefix="/carriers", tags=["Carriers"])


def get_service(db: Session = Depends(get_db)) -> CarrierService:
    return CarrierService(CarrierRepository(db))


@router.get("", response_model=List[CarrierOut])
def list_carriers(service: CarrierService = Depends(get_service)):
    return service.get_all()


@router.get("/{carrier_id}", response_model=CarrierOut)
def get_carrier(carrier_id: int, service: CarrierService = Depends(get_service)):
    return service.get(carrier_id)


@router.post("", response_model=CarrierOut, status_code=201)
def create_carrier(
    payload: CarrierCreate, request: Request,
    db: Session = Depends(get_db), service: CarrierService = Depends(get_service),
):
    new_id = service.save(payload)
    write_log(
        db, action="CARRIER_CREATE", resource="carriers",
        ip=client_ip(request), meta={"id": new_id, "cid": payload.cid}
    )
    return CarrierOut(id=new_id, **payload.model_dump())


@router.patch("/{carrier_id}", response_model=CarrierOut)
def update_carrier(
    carrier_id: int, changes: CarrierUpdate, request: Request,
    db: Session = Depends(get_db), service: CarrierService = Depends(get_service),
):
    updated = service.update(carrier_id, changes)
    write_log(db, action="CARRIER_UPDATE", resource="carriers", ip=client_ip(request), meta={"id": carrier_id})
    return updated


@router.delete("/{carrier_id}", status_code=204)
def delete_carrier(
    carrier_id: int, request: Request,
    db: Session = Depends(get_db), service: CarrierService = Depends(get_service),
):
    service.delete(carrier_id)
    write_log(db, action="CARRIER_DELETE", resource="carriers", ip=client_ip(request), meta={"id": carrier_id})
    return Response(status_code=204)
