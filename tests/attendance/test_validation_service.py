from __future__ import annotations

from datetime import datetime

import pytest

from absenta.attendance.service import ValidationService
from absenta.core.enums import AttendanceStatus, ValidationAction, ValidationStatus
from absenta.core.exceptions import (
    AdminNotFoundError,
    AlreadyProcessedError,
    RecordNotFoundError,
    ValidationError,
)


@pytest.fixture
def svc(attendance_repo, admins_repo):
    attendance_repo.add_student(1, "SIS001", "Ahmad Budi", "10A")
    return ValidationService(attendance_repo, admins_repo)


def test_validate_sets_decision_fields(svc, attendance_repo, fixed_now):
    rid = attendance_repo.add(student_id=1, date="2024-01-15", status=AttendanceStatus.IZIN)

    outcome = svc.validate_or_reject(attendance_id=rid, action="validate", admin_id=1, now=fixed_now)

    rec = attendance_repo.get_by_id(rid)
    assert outcome.validation_status == ValidationStatus.VALIDATED
    assert outcome.message == "Attendance record successfully validated"
    assert rec.validation_status == ValidationStatus.VALIDATED
    assert rec.validated_by == 1
    assert rec.validated_at == fixed_now
    assert rec.updated_at == fixed_now
    # attendance category is never touched by the decision
    assert rec.status == AttendanceStatus.IZIN


def test_reject_overwrites_notes_when_given(svc, attendance_repo, fixed_now):
    rid = attendance_repo.add(student_id=1, date="2024-01-15", status=AttendanceStatus.SAKIT, notes="Surat dokter")

    outcome = svc.validate_or_reject(
        attendance_id=rid, action=ValidationAction.REJECT, admin_id=1, notes="Insufficient documentation", now=fixed_now
    )

    rec = attendance_repo.get_by_id(rid)
    assert outcome.message == "Attendance record successfully rejected"
    assert rec.validation_status == ValidationStatus.REJECTED
    assert rec.notes == "Insufficient documentation"


def test_notes_preserved_when_omitted(svc, attendance_repo):
    rid = attendance_repo.add(student_id=1, date="2024-01-15", status=AttendanceStatus.IZIN, notes="Original student notes")

    svc.validate_or_reject(attendance_id=rid, action="validate", admin_id=1)

    assert attendance_repo.get_by_id(rid).notes == "Original student notes"


def test_empty_notes_string_is_an_explicit_overwrite(svc, attendance_repo):
    rid = attendance_repo.add(student_id=1, date="2024-01-15", status=AttendanceStatus.IZIN, notes="old")

    svc.validate_or_reject(attendance_id=rid, action="validate", admin_id=1, notes="")

    assert attendance_repo.get_by_id(rid).notes == ""


def test_unknown_admin_is_checked_before_record(svc):
    with pytest.raises(AdminNotFoundError) as exc:
        svc.validate_or_reject(attendance_id=999, action="validate", admin_id=42)
    assert str(exc.value) == "Admin not found"


def test_unknown_record(svc):
    with pytest.raises(RecordNotFoundError) as exc:
        svc.validate_or_reject(attendance_id=999, action="validate", admin_id=1)
    assert str(exc.value) == "Attendance record not found"


def test_invalid_action(svc, attendance_repo):
    rid = attendance_repo.add(student_id=1, date="2024-01-15", status=AttendanceStatus.IZIN)

    with pytest.raises(ValidationError):
        svc.validate_or_reject(attendance_id=rid, action="approve", admin_id=1)

    assert attendance_repo.get_by_id(rid).validation_status == ValidationStatus.PENDING


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("validate", "validate", ValidationStatus.VALIDATED),
        ("validate", "reject", ValidationStatus.VALIDATED),
        ("reject", "validate", ValidationStatus.REJECTED),
        ("reject", "reject", ValidationStatus.REJECTED),
    ],
)
def test_terminal_states_are_absorbing(svc, attendance_repo, first, second, expected):
    rid = attendance_repo.add(student_id=1, date="2024-01-15", status=AttendanceStatus.ALPHA)
    svc.validate_or_reject(attendance_id=rid, action=first, admin_id=1, notes="first")
    before = attendance_repo.get_by_id(rid)

    for _ in range(3):
        with pytest.raises(AlreadyProcessedError) as exc:
            svc.validate_or_reject(attendance_id=rid, action=second, admin_id=1, notes="second")
        assert exc.value.current_status == expected
        assert str(exc.value) == f"Attendance record has already been {expected.value}"

    assert attendance_repo.get_by_id(rid) == before


def test_lost_race_reports_winning_state(svc, attendance_repo, monkeypatch):
    rid = attendance_repo.add(student_id=1, date="2024-01-15", status=AttendanceStatus.IZIN)
    real_decide = attendance_repo.decide

    def concurrent_decide(**kwargs):
        # another admin rejects between our read and our guarded write
        real_decide(
            attendance_id=rid,
            status=ValidationStatus.REJECTED,
            decided_by=1,
            decided_at=datetime(2024, 1, 15, 8, 0),
        )
        return real_decide(**kwargs)

    monkeypatch.setattr(attendance_repo, "decide", concurrent_decide)

    with pytest.raises(AlreadyProcessedError) as exc:
        svc.validate_or_reject(attendance_id=rid, action="validate", admin_id=1)

    assert exc.value.current_status == ValidationStatus.REJECTED
    assert attendance_repo.get_by_id(rid).validation_status == ValidationStatus.REJECTED


def test_list_pending_newest_first(svc, attendance_repo):
    attendance_repo.add_student(2, "SIS002", "Siti Aminah", "10B")
    older = attendance_repo.add(student_id=1, date="2024-01-14", status=AttendanceStatus.IZIN, created_at=datetime(2024, 1, 14, 7))
    newer = attendance_repo.add(student_id=2, date="2024-01-15", status=AttendanceStatus.SAKIT, created_at=datetime(2024, 1, 15, 7))
    done = attendance_repo.add(student_id=1, date="2024-01-15", status=AttendanceStatus.ALPHA)
    svc.validate_or_reject(attendance_id=done, action="validate", admin_id=1)

    pending = svc.list_pending()

    assert [p.attendance_id for p in pending] == [newer, older]
    assert pending[0].student.full_name == "Siti Aminah"
    assert pending[0].to_dict()["student"]["class_name"] == "10B"


def test_list_pending_returns_whole_backlog(svc, attendance_repo):
    for _ in range(501):
        attendance_repo.add(student_id=1, date="2024-01-15", status=AttendanceStatus.IZIN)

    assert len(svc.list_pending()) == 501
    assert len(svc.list_pending(limit=10)) == 10
