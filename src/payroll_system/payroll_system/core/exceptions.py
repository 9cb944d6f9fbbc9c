from .constants import MSG_DUPLICATE_ID


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when operator input is invalid. The message is shown verbatim."""


class DuplicateEmployeeError(ValidationError):
    """Raised when an employee id is already registered."""

    def __init__(self, employee_id: str, message: str = MSG_DUPLICATE_ID):
        super().__init__(message)
        self.employee_id = employee_id
