"""Boundary operations exposed to transports.

Each operation returns plain data (dicts/lists) and never lets a domain or
storage failure escape: validation and export report failures as
``{"success": False, "message": ...}``; read paths degrade to empty data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from .container import Container
from .core.exceptions import (
    AlreadyProcessedError,
    AuthenticationError,
    NotFoundError,
    ValidationError,
)
from .dashboard.service import DashboardStats

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Failed to process validation. Please try again."


@dataclass(frozen=True)
class ActionResult:
    success: bool
    message: str
    http_status: int = 200

    def to_dict(self) -> dict:
        return {"success": self.success, "message": self.message}


class Handlers:
    def __init__(self, container: Container):
        self._c = container

    def admin_login(self, identifier: str, password: str) -> dict:
        try:
            profile = self._c.auth_service.authenticate(identifier, password)
        except AuthenticationError as e:
            return {"success": False, "message": str(e)}
        except Exception:
            logger.exception("Admin login failed")
            return {"success": False, "message": "Invalid credentials"}
        return {"success": True, "admin": profile.to_dict()}

    def validate_or_reject(
        self,
        *,
        attendance_id: int,
        action: str,
        admin_id: int,
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> ActionResult:
        try:
            outcome = self._c.validation_service.validate_or_reject(
                attendance_id=attendance_id,
                action=action,
                admin_id=admin_id,
                notes=notes,
                now=now,
            )
        except NotFoundError as e:
            return ActionResult(success=False, message=str(e), http_status=404)
        except AlreadyProcessedError as e:
            return ActionResult(success=False, message=str(e), http_status=409)
        except ValidationError as e:
            return ActionResult(success=False, message=str(e), http_status=400)
        except Exception:
            logger.exception("Failed to validate attendance %s", attendance_id)
            return ActionResult(success=False, message=VALIDATION_FAILED_MESSAGE, http_status=500)
        return ActionResult(success=True, message=outcome.message)

    def get_pending_attendances(self) -> list[dict]:
        try:
            return [p.to_dict() for p in self._c.validation_service.list_pending()]
        except Exception:
            # TODO: return a tagged failure so callers can tell "no data" from "query failed"
            logger.exception("Failed to get pending attendances")
            return []

    def get_dashboard_stats(self, *, today: Optional[date] = None) -> dict:
        try:
            return self._c.dashboard_service.get_stats(today=today).to_dict()
        except Exception:
            logger.exception("Failed to get dashboard stats")
            return DashboardStats().to_dict()

    def get_absence_summary(
        self,
        class_name: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> list[dict]:
        try:
            summary = self._c.absence_aggregator.summarize_absences(
                class_name=class_name, start_date=start_date, end_date=end_date
            )
        except ValidationError as e:
            logger.warning("Absence summary rejected: %s", e)
            return []
        except Exception:
            logger.exception("Failed to get absence summary")
            return []
        return [s.to_dict() for s in summary]

    def export_absence_report(
        self,
        *,
        start_date: Optional[str],
        end_date: Optional[str],
        class_name: Optional[str] = None,
        format: Optional[str] = None,
        include_details: bool = False,
        now: Optional[datetime] = None,
    ) -> dict:
        result = self._c.report_export_service.export_absence_report(
            start_date=start_date,
            end_date=end_date,
            class_name=class_name,
            fmt=format,
            include_details=include_details,
            now=now,
        )
        return result.to_dict()
