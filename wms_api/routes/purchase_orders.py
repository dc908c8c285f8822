# wms_api/routes/purchase_orders.py
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from wms_api.database import get_db
from wms_api.repositories.purchase_order import PurchaseOrderRepository
from wms_api.schemas.purchase_order import PurchaseOrderCreate, PurchaseOrderOut
from wms_api.services.purchase_order import PurchaseOrderService
from wms_api.utils.audit import client_ip, write_log

router = APIRouter(prefix="/purchase-orders", tags=["Purchase orders"])


def get_service(db: Session = Depends(get_db)) -> PurchaseOrderService:
    return PurchaseOrderService(PurchaseOrderRepository(db))


@router.get("", response_model=List[PurchaseOrderOut])
def list_purchase_orders(service: PurchaseOrderService = Depends(get_service)):
    return service.get_all()


@router.get("/{order_id}", response_model=PurchaseOrderOut)
def get_purchase_order(order_id: int, service: PurchaseOrderService = Depends(get_service)):
    return service.get(order_id)


@router.post("", response_model=PurchaseOrderOut, status_code=201)
def create_purchase_order(
    payload: PurchaseOrderCreate, request: Request,
    db: Session = Depends(get_db), service: PurchaseOrderService = Depends(get_service),
):
    new_id = service.save(payload)
    write_log(
        db, action="PURCHASE_ORDER_CREATE", resource="purchase_orders",
        ip=client_ip(request), meta={"id": new_id, "order_number": payload.order_number}
    )
    return PurchaseOrderOut(id=new_id, **payload.model_dump())
