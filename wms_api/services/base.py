# wms_api/services/base.py
import logging
from typing import Any, List, Optional, Tuple

from wms_api.exceptions import DuplicateError, NotFoundError, ReferenceMissingError

logger = logging.getLogger(__name__)


class RecordService:
    """Validate-then-persist flow shared by every resource.

    ``references`` lists ``(field, entity)`` pairs in the order they are
    checked; each is probed through ``repo.<field without _id>_exists``.
    ``key_field`` is the business key that must stay unique.
    """

    entity: str = ""
    key_field: Optional[str] = None
    references: Tuple[Tuple[str, str], ...] = ()

    def __init__(self, repo):
        self.repo = repo

    def get_all(self) -> List[Any]:
        return self.repo.get_all()

    def get(self, id: int):
        return self.repo.get(id)

    def save(self, record) -> int:
        self.run_checks(record)
        new_id = self.repo.save(record)
        logger.info("%s created (id=%s)", self.entity, new_id)
        return new_id

    def run_checks(self, record) -> None:
        # Each step short-circuits; nothing is written after a failed check
        self.validate(record)
        for field, entity in self.references:
            self._require_reference(field, entity, getattr(record, field))
        self._require_free_key(getattr(record, self.key_field, None))

    def validate(self, record) -> None:
        """Entity-specific field rules; raise InvalidInputError on failure."""

    # ---- helpers ----
    def _require_reference(self, field: str, entity: str, value) -> None:
        probe = getattr(self.repo, field[: -len("_id")] + "_exists")
        if not probe(value):
            logger.warning("%s rejected: %s %s does not exist", self.entity, entity, value)
            raise ReferenceMissingError(entity, value)

    def _require_free_key(self, value) -> None:
        if self.key_field and self.repo.exists(value):
            logger.warning("%s rejected: %s=%r already used", self.entity, self.key_field, value)
            raise DuplicateError(self.entity, self.key_field, value)

    def _report_filter(self, probe: str, entity: str, id: Optional[int]) -> Optional[int]:
        # None and 0 both mean "every row"; an unknown id is a 404, not an empty report
        if not id:
            return None
        if not getattr(self.repo, probe)(id):
            logger.warning("%s report rejected: %s %s not found", self.entity, entity, id)
            raise NotFoundError(entity, id)
        return id


class CRUDService(RecordService):
    """Adds partial update and delete on top of RecordService."""

    def update(self, id: int, changes):
        current = self.repo.get(id)

        # None and "" mean "leave unchanged"
        patch = {
            k: v for k, v in changes.model_dump(exclude_none=True).items()
            if v != ""
        }
        merged = current.model_copy(update=patch)
        self.validate(merged)

        for field, entity in self.references:
            if getattr(merged, field) != getattr(current, field):
                self._require_reference(field, entity, getattr(merged, field))

        if self.key_field:
            new_key = getattr(merged, self.key_field)
            if new_key != getattr(current, self.key_field):
                self._require_free_key(new_key)

        self.repo.update(merged)
        logger.info("%s %s updated (%s)", self.entity, id, ", ".join(sorted(patch)) or "no changes")
        return merged

    def delete(self, id: int) -> None:
        self.repo.get(id)
        self.repo.delete(id)
        logger.info("%s %s deleted", self.entity, id)
