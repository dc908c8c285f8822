# wms_api/routes/sections.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.orm import Session

from wms_api.database import get_db
from wms_api.repositories.section import SectionRepository
from wms_api.schemas.reports import SectionProductsReport
from wms_api.schemas.section import SectionCreate, SectionOut, SectionUpdate
from wms_api.services.section import SectionService
from wms_api.utils.audit import client_ip, write_log

router = APIRouter(prefix="/sections", tags=["Sections"])


def get_service(db: Session = Depends(get_db)) -> SectionService:
    return SectionService(SectionRepository(db))


@router.get("/report-products", response_model=List[SectionProductsReport])
def report_products(
    id: Optional[int] = Query(None, description="Only this section"),
    service: SectionService = Depends(get_service),
):
    return service.report_products(id)


@router.get("", response_model=List[SectionOut])
def list_sections(service: SectionService = Depends(get_service)):
    return service.get_all()


@router.get("/{section_id}", response_model=SectionOut)
def get_section(section_id: int, service: SectionService = Depends(get_service)):
    return service.get(section_id)


@router.post("", response_model=SectionOut, status_code=201)
def create_section(
    payload: SectionCreate, request: Request,
    db: Session = Depends(get_db), service: SectionService = Depends(get_service),
):
    new_id = service.save(payload)
    write_log(
        db, action="SECTION_CREATE", resource="sections",
        ip=client_ip(request), meta={"id": new_id, "section_number": payload.section_number}
    )
    return SectionOut(id=new_id, **payload.model_dump())


@router.patch("/{section_id}", response_model=SectionOut)
def update_section(
    section_id: int, changes: SectionUpdate, request: Request,
    db: Session = Depends(get_db), service: SectionService = Depends(get_service),
):
    updated = service.update(section_id, changes)
    write_log(db, action="SECTION_UPDATE", resource="sections", ip=client_ip(request), meta={"id": section_id})
    return updated


@router.delete("/{section_id}", status_code=204)
def delete_section(
    section_id: int, request: Request,
    db: Session = Depends(get_db), service: SectionService = Depends(get_service),
):
    # product batches stored in the section go with it
    service.delete(section_id)
    write_log(db, action="SECTION_DELETE", resource="sections", ip=client_ip(request), meta={"id": section_id})
    return Response(status_code=204)
