class ServiceError(Exception):
    """Base exception for service layer errors.

    ``kind`` is the stable machine-readable code sent to clients next to the
    human-readable message.
    """

    kind = "service_error"
    default_status = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code or self.default_status

    def to_detail(self) -> dict:
        return {"error": self.kind, "message": self.message}


class InputValidationError(ServiceError):
    kind = "validation_error"
    default_status = 422


class NotFound(ServiceError):
    kind = "not_found"
    default_status = 404


class ForeignKeyViolation(NotFound):
    kind = "foreign_key_violation"


class StorageError(ServiceError):
    kind = "storage_error"
    default_status = 503


class TransactionFailure(StorageError):
    kind = "transaction_failure"


class CapabilityNotImplemented(ServiceError):
    kind = "not_implemented"
    default_status = 501

    def __init__(self, capability: str) -> None:
        super().__init__(f"{capability} is not implemented yet")
        self.capability = capability


def require_text(value: str | None, field: str) -> str:
    """Return ``value`` stripped, or raise if it is missing or blank."""
    if value is None or not value.strip():
        raise InputValidationError(f"{field} must not be empty")
    return value.strip()
