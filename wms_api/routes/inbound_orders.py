# wms_api/routes/inbound_orders.py
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from wms_api.database import get_db
from wms_api.repositories.inbound_order import InboundOrderRepository
from wms_api.schemas.inbound_order import InboundOrderCreate, InboundOrderOut
from wms_api.services.inbound_order import InboundOrderService
from wms_api.utils.audit import client_ip, write_log

router = APIRouter(prefix="/inbound-orders", tags=["Inbound orders"])


def get_service(db: Session = Depends(get_db)) -> InboundOrderService:
    return InboundOrderService(InboundOrderRepository(db))


@router.get("", response_model=List[InboundOrderOut])
def list_inbound_orders(service: InboundOrderService = Depends(get_service)):
    return service.get_all()


@router.get("/{order_id}", response_model=InboundOrderOut)
def get_inbound_order(order_id: int, service: InboundOrderService = Depends(get_service)):
    return service.get(order_id)


@router.post("", response_model=InboundOrderOut, status_code=201)
def create_inbound_order(
    payload: InboundOrderCreate, request: Request,
    db: Session = Depends(get_db), service: InboundOrderService = Depends(get_service),
):
    new_id = service.save(payload)
    write_log(
        db, action="INBOUND_ORDER_CREATE", resource="inbound_orders",
        ip=client_ip(request), meta={"id": new_id, "order_number": payload.order_number}
    )
    return InboundOrderOut(id=new_id, **payload.model_dump())
