from __future__ import annotations

import csv
import io
from typing import Sequence

from .base import ReportWriter


class CsvReportWriter(ReportWriter):
    """Plain UTF-8 CSV, header first, newline-separated rows."""

    extension = "csv"
    mimetype = "text/csv"

    def render(self, header: Sequence[str], rows: Sequence[Sequence[object]], *, sheet_name: str = "Laporan") -> bytes:
        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(header)
        for row in rows:
            writer.writerow(["" if v is None else v for v in row])
        return out.getvalue().encode("utf-8")
