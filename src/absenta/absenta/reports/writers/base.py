from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class ReportWriter(ABC):
    """Writer interface (Strategy Pattern for report file formats)."""

    extension: str = ""
    mimetype: str = "application/octet-stream"

    @abstractmethod
    def render(self, header: Sequence[str], rows: Sequence[Sequence[object]], *, sheet_name: str = "Laporan") -> bytes:
        raise NotImplementedError
