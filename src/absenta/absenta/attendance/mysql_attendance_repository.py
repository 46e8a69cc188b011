from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import to_iso_date
from ..core.enums import AttendanceStatus, ValidationStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AbsenceRow, AttendanceRecord, PendingAttendance, Student
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, student_id, date, status, validation_status, notes,
                       validated_by, validated_at, created_at, updated_at
                FROM attendance
                WHERE id=%s
                """,
                (int(attendance_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceRecord(
                attendance_id=int(r["id"]),
                student_id=int(r["student_id"]),
                date=to_iso_date(r["date"]),
                status=AttendanceStatus(r["status"]),
                validation_status=ValidationStatus(r["validation_status"]),
                notes=r.get("notes"),
                validated_by=r.get("validated_by"),
                validated_at=r.get("validated_at"),
                created_at=r.get("created_at"),
                updated_at=r.get("updated_at"),
            )

    def decide(
        self,
        *,
        attendance_id: int,
        status: ValidationStatus,
        decided_by: int,
        decided_at: datetime,
        notes: Optional[str] = None,
    ) -> bool:
        assignments = ["validation_status=%s", "validated_by=%s", "validated_at=%s", "updated_at=%s"]
        params: list[object] = [status.value, int(decided_by), decided_at, decided_at]
        if notes is not None:
            assignments.append("notes=%s")
            params.append(notes)

        # The pending guard makes check-and-set a single statement.
        params.extend([int(attendance_id), ValidationStatus.PENDING.value])

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE attendance
                SET {", ".join(assignments)}
                WHERE id=%s AND validation_status=%s
                """,
                tuple(params),
            )
            return cur.rowcount > 0

    def list_pending(self, *, limit: Optional[int] = None) -> Sequence[PendingAttendance]:
        sql = """
                SELECT a.id, a.date, a.status, a.validation_status, a.notes, a.created_at,
                       s.id AS student_id, s.nis, s.full_name, s.class_name, s.photo_url
                FROM attendance a
                JOIN students s ON s.id = a.student_id
                WHERE a.validation_status=%s
                ORDER BY a.created_at DESC, a.id DESC
                """
        params: list[object] = [ValidationStatus.PENDING.value]
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            rows = fetchall(cur)
            return [
                PendingAttendance(
                    attendance_id=int(r["id"]),
                    student=Student(
                        student_id=int(r["student_id"]),
                        nis=r["nis"],
                        full_name=r["full_name"],
                        class_name=r["class_name"],
                        photo_url=r.get("photo_url"),
                    ),
                    date=to_iso_date(r["date"]),
                    status=AttendanceStatus(r["status"]),
                    validation_status=ValidationStatus(r["validation_status"]),
                    notes=r.get("notes"),
                    created_at=r.get("created_at"),
                )
                for r in rows
            ]

    def list_absence_rows(
        self,
        *,
        class_name: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        validation_status: Optional[ValidationStatus] = None,
    ) -> Sequence[AbsenceRow]:
        clauses = ["a.status<>%s"]
        params: list[object] = [AttendanceStatus.HADIR.value]

        if class_name is not None:
            clauses.append("s.class_name=%s")
            params.append(class_name)
        if start_date is not None:
            clauses.append("a.date>=%s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("a.date<=%s")
            params.append(end_date)
        if validation_status is not None:
            clauses.append("a.validation_status=%s")
            params.append(validation_status.value)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.id, a.student_id, s.nis, s.full_name, s.class_name,
                       a.date, a.status, a.validation_status, a.notes
                FROM attendance a
                JOIN students s ON s.id = a.student_id
                WHERE {where}
                ORDER BY s.class_name ASC, s.full_name ASC, a.date ASC, a.id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                AbsenceRow(
                    attendance_id=int(r["id"]),
                    student_id=int(r["student_id"]),
                    nis=r["nis"],
                    full_name=r["full_name"],
                    class_name=r["class_name"],
                    date=to_iso_date(r["date"]),
                    status=AttendanceStatus(r["status"]),
                    validation_status=ValidationStatus(r["validation_status"]),
                    notes=r.get("notes"),
                )
                for r in rows
            ]

    def count_pending(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS total FROM attendance WHERE validation_status=%s",
                (ValidationStatus.PENDING.value,),
            )
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def count_by_status_on(self, date: str) -> dict[AttendanceStatus, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT status, COUNT(*) AS total
                FROM attendance
                WHERE date=%s
                GROUP BY status
                """,
                (date,),
            )
            return {AttendanceStatus(r["status"]): int(r["total"]) for r in fetchall(cur)}
