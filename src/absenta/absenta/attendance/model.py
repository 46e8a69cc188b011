from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus, ValidationStatus


@dataclass(frozen=True)
class Student:
    """Domain entity: student identity referenced by attendance rows."""

    student_id: int
    nis: str
    full_name: str
    class_name: str
    photo_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "nis": self.nis,
            "full_name": self.full_name,
            "class_name": self.class_name,
            "photo_url": self.photo_url,
        }


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance for one day.

    `date` is kept as ISO YYYY-MM-DD text so range filters compare as strings.
    `validated_by`/`validated_at` are None exactly while the record is pending.
    """

    attendance_id: int
    student_id: int
    date: str
    status: AttendanceStatus
    validation_status: ValidationStatus = ValidationStatus.PENDING
    notes: Optional[str] = None
    validated_by: Optional[int] = None
    validated_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_pending(self) -> bool:
        return self.validation_status == ValidationStatus.PENDING


@dataclass(frozen=True)
class PendingAttendance:
    """Read-model for the validation queue (record joined with its student)."""

    attendance_id: int
    student: Student
    date: str
    status: AttendanceStatus
    validation_status: ValidationStatus
    notes: Optional[str]
    created_at: Optional[datetime]

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "student": self.student.to_dict(),
            "date": self.date,
            "status": self.status.value,
            "validation_status": self.validation_status.value,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class AbsenceRow:
    """Read-model for reporting: one non-present attendance row with student identity."""

    attendance_id: int
    student_id: int
    nis: str
    full_name: str
    class_name: str
    date: str
    status: AttendanceStatus
    validation_status: ValidationStatus
    notes: Optional[str] = None
