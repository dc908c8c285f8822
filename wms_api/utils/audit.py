# wms_api/utils/audit.py
from sqlalchemy.orm import Session
from fastapi import Request

from wms_api.models.log import Log

def write_log(db: Session, *, action, resource, status="SUCCESS", ip=None, meta=None):
    entry = Log(action=action, resource=resource, status=status, ip=ip, meta=meta or {})
    db.add(entry)
    db.commit()

def client_ip(request: Request):
    return request.client.host if request.client else None
