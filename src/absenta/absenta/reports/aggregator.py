from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.model import AbsenceRow
from ..attendance.repository import AttendanceRepository
from ..common.validators import optional_iso_date, optional_text, require_date_order
from ..core.enums import AttendanceStatus, ValidationStatus
from .model import AbsenceReport, StudentAbsenceSummary


def summarize_rows(rows: Iterable[AbsenceRow]) -> list[StudentAbsenceSummary]:
    """Group absence rows per student id and count each category.

    Output is sorted by (class_name, student_name); students with equal keys
    keep first-seen order.
    """

    summary_map: dict[int, StudentAbsenceSummary] = {}

    for r in rows:
        if r.status == AttendanceStatus.HADIR:
            continue

        s = summary_map.get(r.student_id)
        if not s:
            s = StudentAbsenceSummary(
                student_id=r.student_id,
                nis=r.nis,
                student_name=r.full_name,
                class_name=r.class_name,
            )
            summary_map[r.student_id] = s

        s.total_absences += 1
        if r.status == AttendanceStatus.IZIN:
            s.breakdown.izin += 1
        elif r.status == AttendanceStatus.SAKIT:
            s.breakdown.sakit += 1
        elif r.status == AttendanceStatus.ALPHA:
            s.breakdown.alpha += 1

    return sorted(summary_map.values(), key=lambda x: (x.class_name, x.student_name))


class AbsenceAggregator:
    """Turns per-day attendance rows into per-student absence summaries."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build_report(
        self,
        *,
        class_name: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        validated_only: bool = False,
    ) -> AbsenceReport:
        class_name = optional_text(class_name)
        start_date = optional_iso_date(start_date, "start_date")
        end_date = optional_iso_date(end_date, "end_date")
        require_date_order(start_date, end_date)

        rows = [
            r
            for r in self._attendance.list_absence_rows(
                class_name=class_name,
                start_date=start_date,
                end_date=end_date,
                validation_status=ValidationStatus.VALIDATED if validated_only else None,
            )
            if r.status != AttendanceStatus.HADIR
        ]
        return AbsenceReport(rows=rows, summary=summarize_rows(rows))

    def summarize_absences(
        self,
        *,
        class_name: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> list[StudentAbsenceSummary]:
        return self.build_report(class_name=class_name, start_date=start_date, end_date=end_date).summary
