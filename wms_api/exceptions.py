"""Error taxonomy shared by repositories, services and the HTTP layer.

Services raise the most specific kind they can determine from their own
checks. Failures coming straight from the database that were not pre-checked
surface as PersistenceError.
"""


class WMSError(Exception):
    """Base exception for warehouse API errors."""

    status_code = 500
    default_code = "WMS_ERROR"

    def __init__(self, message=None, code=None, details=None):
        """Initialize the exception.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
        """
        self.message = message or "An error occurred in the warehouse API"
        self.code = code or self.default_code
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        return f"[{self.code}] {self.message}"

    def to_dict(self):
        """Convert the exception to a dictionary."""
        error_dict = {
            'error': self.__class__.__name__,
            'message': self.message,
            'code': self.code,
        }

        if self.details:
            error_dict['details'] = self.details

        return error_dict


class NotFoundError(WMSError):
    """Requested row is absent, or a delete affected zero rows."""

    status_code = 404
    default_code = "NOT_FOUND"

    def __init__(self, entity, identifier=None, message=None):
        self.entity = entity
        self.identifier = identifier
        message = message or f"{entity} not found"
        super().__init__(message, details={"entity": entity, "id": identifier})


class DuplicateError(WMSError):
    """A business key is already used by another row."""

    status_code = 409
    default_code = "DUPLICATE"

    def __init__(self, entity, field, value=None, message=None):
        self.entity = entity
        self.field = field
        self.value = value
        message = message or f"{entity} with {field}={value!r} already exists"
        super().__init__(message, details={"entity": entity, "field": field, "value": value})


class ReferenceMissingError(WMSError):
    """A foreign key points at a row that does not exist."""

    status_code = 409
    default_code = "REFERENCE_MISSING"

    def __init__(self, entity, identifier=None, message=None):
        # entity names the referenced type, not the one being written
        self.entity = entity
        self.identifier = identifier
        message = message or f"associated {entity} not found"
        super().__init__(message, details={"entity": entity, "id": identifier})


class InvalidInputError(WMSError):
    """A required field is empty or a numeric field is out of range."""

    status_code = 422
    default_code = "INVALID_INPUT"

    def __init__(self, entity, field, message=None):
        self.entity = entity
        self.field = field
        message = message or f"incorrect data for {entity}: {field}"
        super().__init__(message, details={"entity": entity, "field": field})


class PersistenceError(WMSError):
    """Opaque failure reported by the database."""

    status_code = 500
    default_code = "PERSISTENCE_FAILURE"

    def __init__(self, message=None, details=None):
        super().__init__(message or "Database error", details=details)
