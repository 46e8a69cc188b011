from __future__ import annotations

from ...core.enums import ReportFormat
from .base import ReportWriter
from .csv_writer import CsvReportWriter
from .xlsx_writer import XlsxReportWriter


def writer_for(fmt: ReportFormat) -> ReportWriter:
    """Pick the writer strategy for a report format."""
    if fmt == ReportFormat.XLSX:
        return XlsxReportWriter()
    return CsvReportWriter()


__all__ = ["ReportWriter", "CsvReportWriter", "XlsxReportWriter", "writer_for"]
