from __future__ import annotations

import pytest

from absenta.core.enums import AttendanceStatus as S
from absenta.core.enums import ValidationStatus as V
from absenta.main import create_app


@pytest.fixture
def client(container, attendance_repo):
    attendance_repo.add_student(1, "SIS001", "Ahmad Budi", "10A")
    app = create_app(container=container, settings_module="config.testing")
    return app.test_client()


def test_healthcheck_and_cors(client):
    res = client.get("/healthcheck")

    assert res.status_code == 200
    assert res.get_json()["status"] == "ok"
    assert res.headers["Access-Control-Allow-Origin"] == "http://localhost:3000"


def test_login_session_drives_validation(client, attendance_repo):
    rid = attendance_repo.add(student_id=1, date="2024-01-15", status=S.IZIN)

    assert client.post(f"/api/attendance/{rid}/validate", json={"action": "validate"}).status_code == 400

    login = client.post("/api/admin/login", json={"identifier": "ADM001", "password": "secret"})
    assert login.status_code == 200
    assert login.get_json()["admin"]["id"] == 1

    res = client.post(f"/api/attendance/{rid}/validate", json={"action": "validate", "notes": "ok"})
    assert res.status_code == 200
    assert res.get_json() == {"success": True, "message": "Attendance record successfully validated"}

    res = client.post(f"/api/attendance/{rid}/validate", json={"action": "reject"})
    assert res.status_code == 409

    client.post("/api/admin/logout")
    assert client.post(f"/api/attendance/{rid}/validate", json={"action": "validate"}).status_code == 400


def test_login_failure(client):
    res = client.post("/api/admin/login", json={"identifier": "ADM001", "password": "bad"})

    assert res.status_code == 401
    assert res.get_json() == {"success": False, "message": "Invalid credentials"}


def test_validate_with_explicit_admin(client, attendance_repo):
    rid = attendance_repo.add(student_id=1, date="2024-01-15", status=S.SAKIT)

    assert client.post(f"/api/attendance/{rid}/validate", json={"action": "reject", "admin_id": 1}).status_code == 200
    assert client.post("/api/attendance/999/validate", json={"action": "reject", "admin_id": 1}).status_code == 404
    assert client.post(f"/api/attendance/{rid}/validate", json={"action": "x", "admin_id": "1"}).status_code == 400
    assert (
        client.post(f"/api/attendance/{rid}/validate", json={"action": "reject", "admin_id": 1, "notes": 5}).status_code
        == 400
    )


def test_pending_and_dashboard(client, attendance_repo):
    attendance_repo.add(student_id=1, date="2024-01-15", status=S.IZIN)

    pending = client.get("/api/attendance/pending").get_json()
    stats = client.get("/api/dashboard/stats").get_json()

    assert [p["student"]["full_name"] for p in pending] == ["Ahmad Budi"]
    assert stats["pending_validations"] == 1


def test_summary_query(client, attendance_repo):
    attendance_repo.add(student_id=1, date="2024-01-15", status=S.ALPHA)

    res = client.get("/api/reports/absence-summary?class_name=10A&start_date=2024-01-01&end_date=2024-01-31")

    assert res.get_json() == [
        {
            "class_name": "10A",
            "student_name": "Ahmad Budi",
            "nis": "SIS001",
            "total_absences": 1,
            "breakdown": {"izin": 0, "sakit": 0, "alpha": 1},
        }
    ]


def test_export_and_download(client, attendance_repo):
    attendance_repo.add(student_id=1, date="2024-01-15", status=S.IZIN, validation_status=V.VALIDATED)

    res = client.post("/api/reports/export", json={"start_date": "2024-01-01", "end_date": "2024-01-31"})
    body = res.get_json()

    assert res.status_code == 200
    assert body["message"] == "Laporan berhasil dibuat dengan 1 siswa dan 1 ketidakhadiran"

    download = client.get(body["download_url"])
    assert download.status_code == 200
    assert download.mimetype == "text/csv"
    assert download.data.decode("utf-8").splitlines()[1] == "SIS001,Ahmad Budi,10A,1,1,0,0"
    download.close()

    assert client.get("/reports/missing.csv").status_code == 404


def test_export_requires_dates(client):
    res = client.post("/api/reports/export", json={"end_date": "2024-01-31"})

    assert res.status_code == 400
    assert res.get_json() == {"success": False, "message": "start_date is required"}


def test_null_admin_id_falls_back_to_session(client, attendance_repo):
    rid = attendance_repo.add(student_id=1, date="2024-01-15", status=S.IZIN)
    client.post("/api/admin/login", json={"identifier": "ADM001", "password": "secret"})

    res = client.post(f"/api/attendance/{rid}/validate", json={"action": "validate", "admin_id": None})

    assert res.status_code == 200
    assert attendance_repo.get_by_id(rid).validated_by == 1


@pytest.mark.parametrize("value", ["false", "true", 1, 0])
def test_include_details_must_be_boolean(client, attendance_repo, value):
    res = client.post(
        "/api/reports/export",
        json={"start_date": "2024-01-01", "end_date": "2024-01-31", "include_details": value},
    )

    assert res.status_code == 400
    assert res.get_json() == {"success": False, "message": "include_details must be a boolean"}


def test_include_details_false_skips_detail_file(client, attendance_repo):
    attendance_repo.add(student_id=1, date="2024-01-15", status=S.IZIN, validation_status=V.VALIDATED)

    body = client.post(
        "/api/reports/export",
        json={"start_date": "2024-01-01", "end_date": "2024-01-31", "include_details": False},
    ).get_json()
    with_detail = client.post(
        "/api/reports/export",
        json={"start_date": "2024-01-01", "end_date": "2024-01-31", "include_details": True},
    ).get_json()

    assert body["success"] is True
    assert "detail_url" not in body
    assert with_detail["detail_url"].startswith("/reports/laporan-ketidakhadiran-detail_")
