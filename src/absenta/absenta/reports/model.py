from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..attendance.model import AbsenceRow


@dataclass
class AbsenceBreakdown:
    izin: int = 0
    sakit: int = 0
    alpha: int = 0

    def to_dict(self) -> dict:
        return {"izin": self.izin, "sakit": self.sakit, "alpha": self.alpha}


@dataclass
class StudentAbsenceSummary:
    """Per-student absence totals over a queried window."""

    student_id: int
    nis: str
    student_name: str
    class_name: str
    total_absences: int = 0
    breakdown: AbsenceBreakdown = field(default_factory=AbsenceBreakdown)

    def to_dict(self) -> dict:
        return {
            "class_name": self.class_name,
            "student_name": self.student_name,
            "nis": self.nis,
            "total_absences": self.total_absences,
            "breakdown": self.breakdown.to_dict(),
        }


@dataclass(frozen=True)
class AbsenceReport:
    rows: list[AbsenceRow]
    summary: list[StudentAbsenceSummary]

    @property
    def student_count(self) -> int:
        return len(self.summary)

    @property
    def absence_count(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class StoredReport:
    filename: str
    path: Path
    download_url: str


@dataclass(frozen=True)
class ExportResult:
    success: bool
    message: str
    download_url: Optional[str] = None
    detail_url: Optional[str] = None

    def to_dict(self) -> dict:
        out: dict = {"success": self.success, "message": self.message}
        if self.download_url:
            out["download_url"] = self.download_url
        if self.detail_url:
            out["detail_url"] = self.detail_url
        return out
