from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from .base import ReportWriter


class XlsxReportWriter(ReportWriter):
    """Excel workbook with a single sheet, built through pandas + openpyxl."""

    extension = "xlsx"
    mimetype = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    def render(self, header: Sequence[str], rows: Sequence[Sequence[object]], *, sheet_name: str = "Laporan") -> bytes:
        df = pd.DataFrame([list(r) for r in rows], columns=list(header))
        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=sheet_name)
        return out.getvalue()
