from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from absenta.admins.model import Admin
from absenta.attendance.model import AbsenceRow, AttendanceRecord, PendingAttendance, Student
from absenta.container import build_services
from absenta.core.enums import AttendanceStatus, ValidationStatus
from absenta.core.exceptions import StorageError
from absenta.reports.storage import FileSystemReportStorage


class InMemoryAdmins:
    def __init__(self, admins=()):
        self._by_id: dict[int, Admin] = {a.admin_id: a for a in admins}

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        return self._by_id.get(admin_id)

    def get_by_identifier(self, identifier: str) -> Optional[Admin]:
        for a in self._by_id.values():
            if identifier in (a.nis, a.email):
                return a
        return None


class InMemoryAttendance:
    def __init__(self):
        self.students: dict[int, Student] = {}
        self.records: dict[int, AttendanceRecord] = {}
        self._id = 0
        self._clock = datetime(2024, 1, 1, 7, 0, 0)

    def add_student(self, student_id: int, nis: str, full_name: str, class_name: str) -> Student:
        student = Student(student_id=student_id, nis=nis, full_name=full_name, class_name=class_name)
        self.students[student_id] = student
        return student

    def add(
        self,
        *,
        student_id: int,
        date: str,
        status: AttendanceStatus,
        validation_status: ValidationStatus = ValidationStatus.PENDING,
        notes: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> int:
        self._id += 1
        # created_at increases with insertion order unless given
        self._clock += timedelta(minutes=1)
        decided = validation_status != ValidationStatus.PENDING
        self.records[self._id] = AttendanceRecord(
            attendance_id=self._id,
            student_id=student_id,
            date=date,
            status=status,
            validation_status=validation_status,
            notes=notes,
            validated_by=1 if decided else None,
            validated_at=self._clock if decided else None,
            created_at=created_at or self._clock,
            updated_at=created_at or self._clock,
        )
        return self._id

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self.records.get(attendance_id)

    def decide(self, *, attendance_id, status, decided_by, decided_at, notes=None) -> bool:
        rec = self.records.get(attendance_id)
        if not rec or rec.validation_status != ValidationStatus.PENDING:
            return False
        self.records[attendance_id] = replace(
            rec,
            validation_status=status,
            validated_by=decided_by,
            validated_at=decided_at,
            updated_at=decided_at,
            notes=notes if notes is not None else rec.notes,
        )
        return True

    def list_pending(self, *, limit: Optional[int] = None):
        items = [r for r in self.records.values() if r.validation_status == ValidationStatus.PENDING]
        items.sort(key=lambda r: (r.created_at, r.attendance_id), reverse=True)
        return [
            PendingAttendance(
                attendance_id=r.attendance_id,
                student=self.students[r.student_id],
                date=r.date,
                status=r.status,
                validation_status=r.validation_status,
                notes=r.notes,
                created_at=r.created_at,
            )
            for r in (items if limit is None else items[:limit])
        ]

    def list_absence_rows(self, *, class_name=None, start_date=None, end_date=None, validation_status=None):
        out = []
        for r in self.records.values():
            s = self.students[r.student_id]
            if r.status == AttendanceStatus.HADIR:
                continue
            if class_name is not None and s.class_name != class_name:
                continue
            if start_date is not None and r.date < start_date:
                continue
            if end_date is not None and r.date > end_date:
                continue
            if validation_status is not None and r.validation_status != validation_status:
                continue
            out.append(
                AbsenceRow(
                    attendance_id=r.attendance_id,
                    student_id=s.student_id,
                    nis=s.nis,
                    full_name=s.full_name,
                    class_name=s.class_name,
                    date=r.date,
                    status=r.status,
                    validation_status=r.validation_status,
                    notes=r.notes,
                )
            )
        out.sort(key=lambda x: (x.class_name, x.full_name, x.date, x.attendance_id))
        return out

    def count_pending(self) -> int:
        return sum(1 for r in self.records.values() if r.validation_status == ValidationStatus.PENDING)

    def count_by_status_on(self, date: str):
        counts: dict[AttendanceStatus, int] = {}
        for r in self.records.values():
            if r.date == date:
                counts[r.status] = counts.get(r.status, 0) + 1
        return counts


class BrokenAttendance:
    """Every query fails like a lost database connection."""

    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            raise StorageError("connection refused")

        return _fail


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 15, 9, 30, 0)


@pytest.fixture
def admin():
    return Admin(
        admin_id=1,
        nis="ADM001",
        email="admin@absenta.sch.id",
        password_hash=generate_password_hash("secret"),
        full_name="Admin Satu",
    )


@pytest.fixture
def admins_repo(admin):
    return InMemoryAdmins([admin])


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def broken_attendance_repo():
    return BrokenAttendance()


@pytest.fixture
def report_storage(tmp_path):
    return FileSystemReportStorage(tmp_path / "reports", url_prefix="/reports")


@pytest.fixture
def container(admins_repo, attendance_repo, report_storage):
    return build_services(admins_repo=admins_repo, attendance_repo=attendance_repo, report_storage=report_storage)
