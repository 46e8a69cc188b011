from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..container import Container
from ..handlers import Handlers


def register(app: Flask, container: Container) -> None:
    handlers = Handlers(container)

    @app.route("/api/attendance/pending", methods=["GET"], endpoint="pending_attendances")
    def pending_attendances():
        return jsonify(handlers.get_pending_attendances())

    @app.route("/api/attendance/<int:attendance_id>/validate", methods=["POST"], endpoint="validate_attendance")
    def validate_attendance(attendance_id: int):
        data = request.get_json(silent=True) or {}

        # Explicit admin_id wins; otherwise use the logged-in admin.
        admin_id = data.get("admin_id")
        if admin_id is None:
            admin_id = session.get("admin_id")
        if admin_id is None:
            return jsonify({"success": False, "message": "admin_id is required"}), 400
        try:
            admin_id = int(admin_id)
        except (TypeError, ValueError):
            return jsonify({"success": False, "message": "admin_id must be an integer"}), 400

        notes = data.get("notes")
        if notes is not None and not isinstance(notes, str):
            return jsonify({"success": False, "message": "notes must be a string"}), 400

        result = handlers.validate_or_reject(
            attendance_id=attendance_id,
            action=str(data.get("action") or ""),
            admin_id=admin_id,
            notes=notes,
        )
        return jsonify(result.to_dict()), result.http_status
