from __future__ import annotations


class LockerDeskError(Exception):
    """Base class for every business-rule failure raised by the core."""

    error_code = "LOCKERDESK_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(LockerDeskError):
    """Raise to map to HTTP 404."""

    error_code = "NOT_FOUND"


class ForbiddenError(LockerDeskError):
    """Raise to map to HTTP 403 (role does not allow the operation)."""

    error_code = "FORBIDDEN"


class InvalidStateError(LockerDeskError):
    """Raise to map to HTTP 403 (account state does not allow the operation)."""

    error_code = "INVALID_USER_STATE"


class ConflictError(LockerDeskError):
    """Raise to map to HTTP 409 (uniqueness or entity state violation)."""

    error_code = "CONFLICT"


class UnsupportedActionError(LockerDeskError):
    """Raise to map to HTTP 400 (unknown locker action code)."""

    error_code = "UNSUPPORTED_ACTION"


class ConstraintViolationError(LockerDeskError):
    """Raise to map to HTTP 422 (domain object failed structural validation)."""

    error_code = "CONSTRAINT_VIOLATION"


class InternalError(LockerDeskError):
    """
    The store failed after every check passed. This is a defect between the
    core and its persistence ports, never a client mistake.
    """

    error_code = "INTERNAL"
