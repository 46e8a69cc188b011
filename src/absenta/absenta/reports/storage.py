from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Protocol

from ..core.constants import DEFAULT_REPORTS_URL_PREFIX
from ..core.exceptions import StorageError
from .model import StoredReport

logger = logging.getLogger(__name__)

_SAFE_FILENAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


class ReportStorage(Protocol):
    def save(self, filename: str, content: bytes) -> StoredReport:
        """Persist bytes under a new name; never overwrite an existing artifact."""

        raise NotImplementedError

    def resolve(self, filename: str) -> Path:
        raise NotImplementedError


class FileSystemReportStorage(ReportStorage):
    """Stores artifacts in a directory and maps them to a public URL prefix."""

    def __init__(self, base_dir: str | Path, *, url_prefix: str = DEFAULT_REPORTS_URL_PREFIX):
        self._base_dir = Path(base_dir)
        self._url_prefix = "/" + url_prefix.strip("/")

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def _check_name(self, filename: str) -> str:
        if not _SAFE_FILENAME.match(filename or ""):
            raise StorageError(f"Invalid report file name: {filename!r}")
        return filename

    def save(self, filename: str, content: bytes) -> StoredReport:
        filename = self._check_name(filename)
        try:
            self._base_dir.mkdir(parents=True, exist_ok=True)
            path = self._base_dir / filename
            # "xb" fails on an existing file instead of replacing an earlier report
            with path.open("xb") as fh:
                fh.write(content)
        except OSError as exc:
            raise StorageError(f"Cannot write report {filename}: {exc}") from exc

        logger.debug("Stored report %s (%s bytes)", path, len(content))
        return StoredReport(filename=filename, path=path, download_url=f"{self._url_prefix}/{filename}")

    def resolve(self, filename: str) -> Path:
        path = self._base_dir / self._check_name(filename)
        if not path.is_file():
            raise StorageError(f"Report not found: {filename}")
        return path
