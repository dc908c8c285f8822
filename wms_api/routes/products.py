# wms_api/routes/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.orm import Session

from wms_api.database import get_db
from wms_api.repositories.product import ProductRepository
from wms_api.schemas.product import (
    ProductCreate, ProductOut, ProductRecordCreate, ProductRecordOut, ProductUpdate,
)
from wms_api.schemas.reports import ProductRecordsReport
from wms_api.services.product import ProductService
from wms_api.utils.audit import client_ip, write_log

router = APIRouter(tags=["Products"])


def get_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(ProductRepository(db))


# =========================
# PRODUCT RECORDS (price history)
# =========================
@router.get("/products/report-records", response_model=List[ProductRecordsReport])
def report_records(
    id: Optional[int] = Query(None, description="Only this product"),
    service: ProductService = Depends(get_service),
):
    return service.report_records(id)


@router.post("/product-records", response_model=ProductRecordOut, status_code=201)
def create_product_record(
    payload: ProductRecordCreate, request: Request,
    db: Session = Depends(get_db), service: ProductService = Depends(get_service),
):
    new_id = service.create_record(payload)
    write_log(
        db, action="PRODUCT_RECORD_CREATE", resource="product_records",
        ip=client_ip(request), meta={"id": new_id, "product_id": payload.product_id}
    )
    return ProductRecordOut(id=new_id, **payload.model_dump())


@router.get("/product-records/{record_id}", response_model=ProductRecordOut)
def get_product_record(record_id: int, service: ProductService = Depends(get_service)):
    return service.get_record(record_id)


# =========================
# PRODUCTS
# =========================
@router.get("/products", response_model=List[ProductOut])
def list_products(service: ProductService = Depends(get_service)):
    return service.get_all()


@router.get("/products/{product_id}", response_model=ProductOut)
def get_product(product_id: int, service: ProductService = Depends(get_service)):
    return service.get(product_id)


@router.post("/products", response_model=ProductOut, status_code=201)
def create_product(
    payload: ProductCreate, request: Request,
    db: Session = Depends(get_db), service: ProductService = Depends(get_service),
):
    new_id = service.save(payload)
    write_log(
        db, action="PRODUCT_CREATE", resource="products",
        ip=client_ip(request), meta={"id": new_id, "code": payload.product_code}
    )
    return ProductOut(id=new_id, **payload.model_dump())


@router.patch("/products/{product_id}", response_model=ProductOut)
def update_product(
    product_id: int, changes: ProductUpdate, request: Request,
    db: Session = Depends(get_db), service: ProductService = Depends(get_service),
):
    updated = service.update(product_id, changes)
    write_log(db, action="PRODUCT_UPDATE", resource="products", ip=client_ip(request), meta={"id": product_id})
    return updated


@router.delete("/products/{product_id}", status_code=204)
def delete_product(
    product_id: int, request: Request,
    db: Session = Depends(get_db), service: ProductService = Depends(get_service),
):
    service.delete(product_id)
    write_log(db, action="PRODUCT_DELETE", resource="products", ip=client_ip(request), meta={"id": product_id})
    return Response(status_code=204)
