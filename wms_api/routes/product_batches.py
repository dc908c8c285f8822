# wms_api/routes/product_batches.py
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from wms_api.database import get_db
from wms_api.repositories.batch import ProductBatchRepository
from wms_api.schemas.batch import ProductBatchCreate, ProductBatchOut
from wms_api.services.batch import ProductBatchService
from wms_api.utils.audit import client_ip, write_log

router = APIRouter(prefix="/product-batches", tags=["Product batches"])


def get_service(db: Session = Depends(get_db)) -> ProductBatchService:
    return ProductBatchService(ProductBatchRepository(db))


@router.get("", response_model=List[ProductBatchOut])
def list_batches(service: ProductBatchService = Depends(get_service)):
    return service.get_all()


@router.get("/{batch_id}", response_model=ProductBatchOut)
def get_batch(batch_id: int, service: ProductBatchService = Depends(get_service)):
    return service.get(batch_id)


@router.post("", response_model=ProductBatchOut, status_code=201)
def create_batch(
    payload: ProductBatchCreate, request: Request,
    db: Session = Depends(get_db), service: ProductBatchService = Depends(get_service),
):
    new_id = service.save(payload)
    write_log(
        db, action="PRODUCT_BATCH_CREATE", resource="product_batches",
        ip=client_ip(request), meta={"id": new_id, "batch_number": payload.batch_number}
    )
    return ProductBatchOut(id=new_id, **payload.model_dump())
