from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..admins.repository import AdminRepository
from ..common.datetime_utils import now_local
from ..core.enums import ValidationAction, ValidationStatus
from ..core.exceptions import (
    AdminNotFoundError,
    AlreadyProcessedError,
    RecordNotFoundError,
    StorageError,
    ValidationError,
)
from .model import PendingAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationOutcome:
    attendance_id: int
    validation_status: ValidationStatus
    validated_by: int
    validated_at: datetime

    @property
    def message(self) -> str:
        return f"Attendance record successfully {self.validation_status.value}"


class ValidationService:
    """Use case: admins validate or reject pending attendance records.

    A record leaves PENDING at most once; VALIDATED and REJECTED are final.
    """

    def __init__(self, attendance: AttendanceRepository, admins: AdminRepository):
        self._attendance = attendance
        self._admins = admins

    @staticmethod
    def _parse_action(action: ValidationAction | str) -> ValidationAction:
        if isinstance(action, ValidationAction):
            return action
        try:
            return ValidationAction((action or "").strip().lower())
        except ValueError:
            raise ValidationError("Action must be either 'validate' or 'reject'")

    def validate_or_reject(
        self,
        *,
        attendance_id: int,
        action: ValidationAction | str,
        admin_id: int,
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> ValidationOutcome:
        action = self._parse_action(action)
        now = now or now_local()

        if not self._admins.get_by_id(int(admin_id)):
            raise AdminNotFoundError()

        record = self._attendance.get_by_id(int(attendance_id))
        if not record:
            raise RecordNotFoundError()
        if not record.is_pending:
            raise AlreadyProcessedError(record.validation_status)

        target = action.target_status
        updated = self._attendance.decide(
            attendance_id=record.attendance_id,
            status=target,
            decided_by=int(admin_id),
            decided_at=now,
            notes=notes,
        )
        if not updated:
            # Lost the race to another decision between the read and the guarded write.
            current = self._attendance.get_by_id(record.attendance_id)
            if not current:
                raise RecordNotFoundError()
            if not current.is_pending:
                raise AlreadyProcessedError(current.validation_status)
            raise StorageError(f"Attendance record {record.attendance_id} was not updated")

        logger.info(
            "Attendance %s %s by admin %s", record.attendance_id, target.value, int(admin_id)
        )
        return ValidationOutcome(
            attendance_id=record.attendance_id,
            validation_status=target,
            validated_by=int(admin_id),
            validated_at=now,
        )

    def list_pending(self, *, limit: Optional[int] = None) -> Sequence[PendingAttendance]:
        """Whole pending queue unless `limit` is given."""
        return self._attendance.list_pending(limit=limit)
