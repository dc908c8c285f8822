# wms_api/repositories/base.py
import logging
from contextlib import contextmanager
from typing import Any, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from wms_api.exceptions import DuplicateError, NotFoundError, PersistenceError, WMSError

logger = logging.getLogger(__name__)


class SQLRepository:
    """CRUD and existence probes for one table.

    Subclasses set ``model`` (ORM class), ``schema`` (pydantic record returned
    to callers), ``entity`` (name used in errors) and ``key_field`` (business
    key column). Repositories hold no business rules beyond "does this row
    exist"; uniqueness and references are checked by the services.
    """

    model: Any = None
    schema: Any = None
    entity: str = ""
    key_field: Optional[str] = None

    def __init__(self, db: Session):
        self.db = db

    # ---- READ ----
    def get_all(self) -> List[Any]:
        rows = self._fetch(self.db.query(self.model).order_by(self.model.id), "get_all")
        return [self.schema.model_validate(r) for r in rows]

    def get(self, id: int):
        try:
            row = self.db.query(self.model).filter(self.model.id == id).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise self._persistence_error("get", e) from e
        if row is None:
            raise NotFoundError(self.entity, id)
        return self.schema.model_validate(row)

    def exists(self, key) -> bool:
        return self._key_owner(key) is not None

    # ---- WRITE ----
    def save(self, record) -> int:
        row = self.model(**record.model_dump())
        with self._transaction("save", record):
            self.db.add(row)
            self.db.flush()
            new_id = row.id
        return new_id

    def update(self, record) -> None:
        # Full-row overwrite; zero matched rows is not an error here
        values = record.model_dump(exclude={"id"})
        with self._transaction("update", record):
            self.db.query(self.model).filter(self.model.id == record.id).update(
                values, synchronize_session=False
            )

    def delete(self, id: int) -> None:
        with self._transaction("delete"):
            affected = self.db.query(self.model).filter(self.model.id == id).delete(
                synchronize_session=False
            )
            if affected < 1:
                raise NotFoundError(self.entity, id)

    # ---- HELPERS ----
    def _key_owner(self, value) -> Optional[int]:
        # id of the row holding this business key, None when free or unknown
        column = getattr(self.model, self.key_field)
        try:
            row = self.db.query(self.model.id).filter(column == value).first()
        except SQLAlchemyError:
            logger.warning("Key probe on %s.%s failed", self.model.__tablename__, self.key_field, exc_info=True)
            self.db.rollback()
            return None
        return row[0] if row else None

    def _probe(self, column, value) -> bool:
        """Single-column existence check; a failing query counts as absent."""
        try:
            return self.db.query(column).filter(column == value).first() is not None
        except SQLAlchemyError:
            logger.warning("Existence probe on %s failed", column, exc_info=True)
            self.db.rollback()
            return False

    def _fetch(self, query, op: str):
        try:
            return query.all()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise self._persistence_error(op, e) from e

    @contextmanager
    def _transaction(self, op: str, record=None):
        try:
            yield
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise self._integrity_error(op, record, e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise self._persistence_error(op, e) from e
        except WMSError:
            self.db.rollback()
            raise

    def _integrity_error(self, op: str, record, error: IntegrityError) -> WMSError:
        # The unique constraint is the final guard against concurrent inserts
        # that both passed the service pre-check.
        if record is not None and self.key_field:
            key = getattr(record, self.key_field)
            owner = self._key_owner(key)
            if owner is not None and owner != getattr(record, "id", None):
                logger.warning("%s %s rejected by unique constraint on %s=%r", self.entity, op, self.key_field, key)
                return DuplicateError(self.entity, self.key_field, key)
        return self._persistence_error(op, error)

    def _persistence_error(self, op: str, error: SQLAlchemyError) -> PersistenceError:
        logger.exception("%s %s failed: %s", self.entity, op, error)
        return PersistenceError(
            f"could not {op.replace('_', ' ')} {self.entity}",
            details={"entity": self.entity, "operation": op},
        )
