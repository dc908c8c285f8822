# wms_api/routes/employees.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.orm import Session

from wms_api.database import get_db
from wms_api.repositories.employee import EmployeeRepository
from wms_api.repositories.inbound_order import InboundOrderRepository
from wms_api.schemas.employee import EmployeeCreate, EmployeeOut, EmployeeUpdate
from wms_api.schemas.reports import EmployeeInboundOrdersReport
from wms_api.services.employee import EmployeeService
from wms_api.services.inbound_order import InboundOrderService
from wms_api.utils.audit import client_ip, write_log

router = APIRouter(prefix="/employees", tags=["Employees"])


def get_service(db: Session = Depends(get_db)) -> EmployeeService:
    return EmployeeService(EmployeeRepository(db))


def get_inbound_service(db: Session = Depends(get_db)) -> InboundOrderService:
    return InboundOrderService(InboundOrderRepository(db))


@router.get("/report-inbound-orders", response_model=List[EmployeeInboundOrdersReport])
def report_inbound_orders(
    id: Optional[int] = Query(None, description="Only this employee"),
    service: InboundOrderService = Depends(get_inbound_service),
):
    return service.report_by_employee(id)


@router.get("", response_model=List[EmployeeOut])
def list_employees(service: EmployeeService = Depends(get_service)):
    return service.get_all()


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: int, service: EmployeeService = Depends(get_service)):
    return service.get(employee_id)


@router.post("", response_model=EmployeeOut, status_code=201)
def create_employee(
    payload: EmployeeCreate, request: Request,
    db: Session = Depends(get_db), service: EmployeeService = Depends(get_service),
):
    new_id = service.save(payload)
    write_log(db, action="EMPLOYEE_CREATE", resource="employees", ip=client_ip(request), meta={"id": new_id})
    return EmployeeOut(id=new_id, **payload.model_dump())


@router.patch("/{employee_id}", response_model=EmployeeOut)
def update_employee(
    employee_id: int, changes: EmployeeUpdate, request: Request,
    db: Session = Depends(get_db), service: EmployeeService = Depends(get_service),
):
    updated = service.update(employee_id, changes)
    write_log(db, action="EMPLOYEE_UPDATE", resource="employees", ip=client_ip(request), meta={"id": employee_id})
    return updated


@router.delete("/{employee_id}", status_code=204)
def delete_employee(
    employee_id: int, request: Request,
    db: Session = Depends(get_db), service: EmployeeService = Depends(get_service),
):
    service.delete(employee_id)
    write_log(db, action="EMPLOYEE_DELETE", resource="employees", ip=client_ip(request), meta={"id": employee_id})
    return Response(status_code=204)
