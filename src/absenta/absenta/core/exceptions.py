from __future__ import annotations

from .enums import ValidationStatus


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or a mandatory field is missing."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class AdminNotFoundError(NotFoundError):
    def __init__(self, message: str = "Admin not found"):
        super().__init__(message)


class RecordNotFoundError(NotFoundError):
    def __init__(self, message: str = "Attendance record not found"):
        super().__init__(message)


class AlreadyProcessedError(DomainError):
    """Raised when a validation decision targets a record that is no longer pending."""

    def __init__(self, current_status: ValidationStatus):
        self.current_status = current_status
        super().__init__(f"Attendance record has already been {current_status.value}")


class StorageError(DomainError):
    """Raised when the underlying store fails a query or write."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
