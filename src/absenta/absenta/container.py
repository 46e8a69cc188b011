from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .admins.mysql_admin_repository import MySQLAdminRepository
from .admins.repository import AdminRepository
from .admins.service import AuthService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import ValidationService
from .core.constants import DEFAULT_REPORTS_URL_PREFIX
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .reports.aggregator import AbsenceAggregator
from .reports.service import ReportExportService
from .reports.storage import FileSystemReportStorage, ReportStorage


@dataclass(frozen=True)
class Container:
    admins_repo: AdminRepository
    attendance_repo: AttendanceRepository
    report_storage: ReportStorage

    auth_service: AuthService
    validation_service: ValidationService
    absence_aggregator: AbsenceAggregator
    report_export_service: ReportExportService
    dashboard_service: DashboardService

    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    admins_repo: AdminRepository,
    attendance_repo: AttendanceRepository,
    report_storage: ReportStorage,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    aggregator = AbsenceAggregator(attendance_repo)
    return Container(
        admins_repo=admins_repo,
        attendance_repo=attendance_repo,
        report_storage=report_storage,
        auth_service=AuthService(admins_repo),
        validation_service=ValidationService(attendance_repo, admins_repo),
        absence_aggregator=aggregator,
        report_export_service=ReportExportService(aggregator, report_storage),
        dashboard_service=DashboardService(attendance_repo),
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    reports_dir: str | Path,
    reports_url_prefix: str = DEFAULT_REPORTS_URL_PREFIX,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        admins_repo=MySQLAdminRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        report_storage=FileSystemReportStorage(reports_dir, url_prefix=reports_url_prefix),
        conn=conn,
    )
