from __future__ import annotations

import logging
import secrets
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_date_order, require_iso_date
from ..core.constants import DETAIL_HEADER, DETAIL_REPORT_MARKER, SUMMARY_HEADER, SUMMARY_REPORT_MARKER
from ..core.enums import ReportFormat
from ..core.exceptions import ValidationError
from .aggregator import AbsenceAggregator
from .model import AbsenceReport, ExportResult
from .storage import ReportStorage
from .writers import ReportWriter, writer_for

logger = logging.getLogger(__name__)

EXPORT_FAILED_MESSAGE = "Gagal mengekspor laporan. Silakan coba lagi."


def _default_token() -> str:
    return secrets.token_hex(4)


class ReportExportService:
    """Use case: export the validated-absence report for a date range.

    The export boundary never raises; every outcome is an ExportResult.
    """

    def __init__(
        self,
        aggregator: AbsenceAggregator,
        storage: ReportStorage,
        *,
        token_factory: Callable[[], str] = _default_token,
    ):
        self._aggregator = aggregator
        self._storage = storage
        self._token_factory = token_factory

    def build_filename(self, *, marker: str, start_date: str, end_date: str, extension: str, now: datetime) -> str:
        return f"{marker}_{start_date}_{end_date}_{now.strftime('%Y%m%d%H%M%S')}_{self._token_factory()}.{extension}"

    @staticmethod
    def _summary_table(report: AbsenceReport) -> list[list[object]]:
        return [
            [s.nis, s.student_name, s.class_name, s.total_absences, s.breakdown.izin, s.breakdown.sakit, s.breakdown.alpha]
            for s in report.summary
        ]

    @staticmethod
    def _detail_table(report: AbsenceReport) -> list[list[object]]:
        rows = sorted(report.rows, key=lambda r: (r.class_name, r.full_name, r.date))
        return [[r.nis, r.full_name, r.class_name, r.date, r.status.value, r.notes or ""] for r in rows]

    def export_absence_report(
        self,
        *,
        start_date: Optional[str],
        end_date: Optional[str],
        class_name: Optional[str] = None,
        fmt: ReportFormat | str | None = None,
        include_details: bool = False,
        now: Optional[datetime] = None,
    ) -> ExportResult:
        try:
            start = require_iso_date(start_date, "start_date")
            end = require_iso_date(end_date, "end_date")
            require_date_order(start, end)
            try:
                report_format = fmt if isinstance(fmt, ReportFormat) else ReportFormat.parse(fmt)
            except ValueError:
                raise ValidationError(f"Unsupported report format: {fmt}")

            report = self._aggregator.build_report(
                class_name=optional_text(class_name),
                start_date=start,
                end_date=end,
                validated_only=True,
            )

            now = now or now_local()
            writer: ReportWriter = writer_for(report_format)

            summary_name = self.build_filename(
                marker=SUMMARY_REPORT_MARKER, start_date=start, end_date=end, extension=writer.extension, now=now
            )
            summary = self._storage.save(
                summary_name, writer.render(SUMMARY_HEADER, self._summary_table(report), sheet_name="Ringkasan")
            )

            detail_url = None
            if include_details:
                detail_name = self.build_filename(
                    marker=DETAIL_REPORT_MARKER, start_date=start, end_date=end, extension=writer.extension, now=now
                )
                detail = self._storage.save(
                    detail_name, writer.render(DETAIL_HEADER, self._detail_table(report), sheet_name="Detail")
                )
                detail_url = detail.download_url

        except ValidationError as e:
            return ExportResult(success=False, message=str(e))
        except Exception:
            logger.exception("Failed to export absence report (%s..%s, class=%r)", start_date, end_date, class_name)
            return ExportResult(success=False, message=EXPORT_FAILED_MESSAGE)

        logger.info(
            "Exported %s: %s students, %s absences", summary.filename, report.student_count, report.absence_count
        )
        return ExportResult(
            success=True,
            download_url=summary.download_url,
            detail_url=detail_url,
            message=(
                f"Laporan berhasil dibuat dengan {report.student_count} siswa "
                f"dan {report.absence_count} ketidakhadiran"
            ),
        )
