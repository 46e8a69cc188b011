from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus, ValidationStatus
from .model import AbsenceRow, AttendanceRecord, PendingAttendance


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def decide(
        self,
        *,
        attendance_id: int,
        status: ValidationStatus,
        decided_by: int,
        decided_at: datetime,
        notes: Optional[str] = None,
    ) -> bool:
        """Move a PENDING record to `status` in one conditional write.

        `notes=None` leaves stored notes untouched. Returns False when no row
        was updated (record missing or no longer pending).
        """

        raise NotImplementedError

    def list_pending(self, *, limit: Optional[int] = None) -> Sequence[PendingAttendance]:
        """Pending records joined with student, newest created first.

        `limit=None` returns every pending record.
        """

        raise NotImplementedError

    def list_absence_rows(
        self,
        *,
        class_name: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        validation_status: Optional[ValidationStatus] = None,
    ) -> Sequence[AbsenceRow]:
        """Rows whose status is not HADIR, filters combined with AND.

        Ordered by class name, student name, date.
        """

        raise NotImplementedError

    def count_pending(self) -> int:
        raise NotImplementedError

    def count_by_status_on(self, date: str) -> dict[AttendanceStatus, int]:
        """Per-category row counts for one calendar day (any validation status)."""

        raise NotImplementedError
