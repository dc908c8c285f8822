# wms_api/routes/warehouses.py
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from wms_api.database import get_db
from wms_api.repositories.warehouse import WarehouseRepository
from wms_api.schemas.warehouse import WarehouseCreate, WarehouseOut, WarehouseUpdate
from wms_api.services.warehouse import WarehouseService
from wms_api.utils.audit import client_ip, write_log

router = APIRouter(prefix="/warehouses", tags=["Warehouses"])


def get_service(db: Session = Depends(get_db)) -> WarehouseService:
    return WarehouseService(WarehouseRepository(db))


@router.get("", response_model=List[WarehouseOut])
def list_warehouses(service: WarehouseService = Depends(get_service)):
    return service.get_all()


@router.get("/{warehouse_id}", response_model=WarehouseOut)
def get_warehouse(warehouse_id: int, service: WarehouseService = Depends(get_service)):
    return service.get(warehouse_id)


@router.post("", response_model=WarehouseOut, status_code=201)
def create_warehouse(
    payload: WarehouseCreate, request: Request,
    db: Session = Depends(get_db), service: WarehouseService = Depends(get_service),
):
    new_id = service.save(payload)
    write_log(
        db, action="WAREHOUSE_CREATE", resource="warehouses",
        ip=client_ip(request), meta={"id": new_id, "code": payload.warehouse_code}
    )
    return WarehouseOut(id=new_id, **payload.model_dump())


@router.patch("/{warehouse_id}", response_model=WarehouseOut)
def update_warehouse(
    warehouse_id: int, changes: WarehouseUpdate, request: Request,
    db: Session = Depends(get_db), service: WarehouseService = Depends(get_service),
):
    updated = service.update(warehouse_id, changes)
    write_log(db, action="WAREHOUSE_UPDATE", resource="warehouses", ip=client_ip(request), meta={"id": warehouse_id})
    return updated


@router.delete("/{warehouse_id}", status_code=204)
def delete_warehouse(
    warehouse_id: int, request: Request,
    db: Session = Depends(get_db), service: WarehouseService = Depends(get_service),
):
    service.delete(warehouse_id)
    write_log(db, action="WAREHOUSE_DELETE", resource="warehouses", ip=client_ip(request), meta={"id": warehouse_id})
    return Response(status_code=204)
