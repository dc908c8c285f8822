# wms_api/routes/buyers.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.orm import Session

from wms_api.database import get_db
from wms_api.repositories.buyer import BuyerRepository
from wms_api.repositories.purchase_order import PurchaseOrderRepository
from wms_api.schemas.buyer import BuyerCreate, BuyerOut, BuyerUpdate
from wms_api.schemas.reports import BuyerPurchaseOrdersReport
from wms_api.services.buyer import BuyerService
from wms_api.services.purchase_order import PurchaseOrderService
from wms_api.utils.audit import client_ip, write_log

router = APIRouter(prefix="/buyers", tags=["Buyers"])


def get_service(db: Session = Depends(get_db)) -> BuyerService:
    return BuyerService(BuyerRepository(db))


def get_order_service(db: Session = Depends(get_db)) -> PurchaseOrderService:
    return PurchaseOrderService(PurchaseOrderRepository(db))


@router.get("/report-purchase-orders", response_model=List[BuyerPurchaseOrdersReport])
def report_purchase_orders(
    id: Optional[int] = Query(None, description="Only this buyer"),
    service: PurchaseOrderService = Depends(get_order_service),
):
    return service.report_by_buyer(id)


@router.get("", response_model=List[BuyerOut])
def list_buyers(service: BuyerService = Depends(get_service)):
    return service.get_all()


@router.get("/{buyer_id}", response_model=BuyerOut)
def get_buyer(buyer_id: int, service: BuyerService = Depends(get_service)):
    return service.get(buyer_id)


@router.post("", response_model=BuyerOut, status_code=201)
def create_buyer(
    payload: BuyerCreate, request: Request,
    db: Session = Depends(get_db), service: BuyerService = Depends(get_service),
):
    new_id = service.save(payload)
    write_log(db, action="BUYER_CREATE", resource="buyers", ip=client_ip(request), meta={"id": new_id})
    return BuyerOut(id=new_id, **payload.model_dump())


@router.patch("/{buyer_id}", response_model=BuyerOut)
def update_buyer(
    buyer_id: int, changes: BuyerUpdate, request: Request,
    db: Session = Depends(get_db), service: BuyerService = Depends(get_service),
):
    updated = service.update(buyer_id, changes)
    write_log(db, action="BUYER_UPDATE", resource="buyers", ip=client_ip(request), meta={"id": buyer_id})
    return updated


@router.delete("/{buyer_id}", status_code=204)
def delete_buyer(
    buyer_id: int, request: Request,
    db: Session = Depends(get_db), service: BuyerService = Depends(get_service),
):
    service.delete(buyer_id)
    write_log(db, action="BUYER_DELETE", resource="buyers", ip=client_ip(request), meta={"id": buyer_id})
    return Response(status_code=204)
