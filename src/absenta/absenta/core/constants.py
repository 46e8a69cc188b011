"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

from .enums import AttendanceStatus

ABSENCE_STATUSES = (AttendanceStatus.IZIN, AttendanceStatus.SAKIT, AttendanceStatus.ALPHA)

SUMMARY_REPORT_MARKER = "laporan-ketidakhadiran-ringkasan"
DETAIL_REPORT_MARKER = "laporan-ketidakhadiran-detail"

SUMMARY_HEADER = ["NIS", "Nama Siswa", "Kelas", "Total Tidak Hadir", "Izin", "Sakit", "Alpha"]
DETAIL_HEADER = ["NIS", "Nama Siswa", "Kelas", "Tanggal", "Status", "Catatan"]

DEFAULT_REPORTS_URL_PREFIX = "/reports"
