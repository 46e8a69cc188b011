from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance category recorded for a student."""

    HADIR = "hadir"
    IZIN = "izin"
    SAKIT = "sakit"
    ALPHA = "alpha"


class ValidationStatus(str, Enum):
    """Admin review lifecycle: PENDING moves once to VALIDATED or REJECTED."""

    PENDING = "pending"
    VALIDATED = "validated"
    REJECTED = "rejected"


class ValidationAction(str, Enum):
    VALIDATE = "validate"
    REJECT = "reject"

    @property
    def target_status(self) -> ValidationStatus:
        if self is ValidationAction.VALIDATE:
            return ValidationStatus.VALIDATED
        return ValidationStatus.REJECTED


class ReportFormat(str, Enum):
    CSV = "csv"
    XLSX = "xlsx"

    @classmethod
    def parse(cls, value: str | None) -> "ReportFormat":
        v = (value or cls.CSV.value).strip().lower()
        if v == "excel":
            return cls.XLSX
        return cls(v)
