# wms_api/routes/sellers.py
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from wms_api.database import get_db
from wms_api.repositories.seller import SellerRepository
from wms_api.schemas.seller import SellerCreate, SellerOut, SellerUpdate
from wms_api.services.seller import SellerService
from wms_api.utils.audit import client_ip, write_log

router = APIRouter(prefix="/sellers", tags=["Sellers"])


def get_service(db: Session = Depends(get_db)) -> SellerService:
    return SellerService(SellerRepository(db))


@router.get("", response_model=List[SellerOut])
def list_sellers(service: SellerService = Depends(get_service)):
    return service.get_all()


@router.get("/{seller_id}", response_model=SellerOut)
def get_seller(seller_id: int, service: SellerService = Depends(get_service)):
    return service.get(seller_id)


@router.post("", response_model=SellerOut, status_code=201)
def create_seller(
    payload: SellerCreate, request: Request,
    db: Session = Depends(get_db), service: SellerService = Depends(get_service),
):
    new_id = service.save(payload)
    write_log(
        db, action="SELLER_CREATE", resource="sellers",
        ip=client_ip(request), meta={"id": new_id, "cid": payload.cid}
    )
    return SellerOut(id=new_id, **payload.model_dump())


@router.patch("/{seller_id}", response_model=SellerOut)
def update_seller(
    seller_id: int, changes: SellerUpdate, request: Request,
    db: Session = Depends(get_db), service: SellerService = Depends(get_service),
):
    updated = service.update(seller_id, changes)
    write_log(db, action="SELLER_UPDATE", resource="sellers", ip=client_ip(request), meta={"id": seller_id})
    return updated


@router.delete("/{seller_id}", status_code=204)
def delete_seller(
    seller_id: int, request: Request,
    db: Session = Depends(get_db), service: SellerService = Depends(get_service),
):
    service.delete(seller_id)
    write_log(db, action="SELLER_DELETE", resource="sellers", ip=client_ip(request), meta={"id": seller_id})
    return Response(status_code=204)
