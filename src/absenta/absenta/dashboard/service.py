from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_iso
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class TodayStats:
    hadir: int = 0
    izin: int = 0
    sakit: int = 0
    alpha: int = 0

    @property
    def total(self) -> int:
        return self.hadir + self.izin + self.sakit + self.alpha

    def to_dict(self) -> dict:
        return {
            "hadir": self.hadir,
            "izin": self.izin,
            "sakit": self.sakit,
            "alpha": self.alpha,
            "total": self.total,
        }


@dataclass(frozen=True)
class DashboardStats:
    pending_validations: int = 0
    today_stats: TodayStats = field(default_factory=TodayStats)

    def to_dict(self) -> dict:
        return {"pending_validations": self.pending_validations, "today_stats": self.today_stats.to_dict()}


class DashboardService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def get_stats(self, *, today: Optional[date] = None) -> DashboardStats:
        """Global pending backlog plus per-category counts for `today` (server local date by default)."""
        counts = self._attendance.count_by_status_on(today_iso(today))
        return DashboardStats(
            pending_validations=int(self._attendance.count_pending()),
            today_stats=TodayStats(
                hadir=int(counts.get(AttendanceStatus.HADIR, 0)),
                izin=int(counts.get(AttendanceStatus.IZIN, 0)),
                sakit=int(counts.get(AttendanceStatus.SAKIT, 0)),
                alpha=int(counts.get(AttendanceStatus.ALPHA, 0)),
            ),
        )
