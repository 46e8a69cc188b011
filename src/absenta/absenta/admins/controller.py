from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..container import Container
from ..handlers import Handlers


def register(app: Flask, container: Container) -> None:
    handlers = Handlers(container)

    @app.route("/api/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        data = request.get_json(silent=True) or {}
        result = handlers.admin_login(str(data.get("identifier") or ""), str(data.get("password") or ""))
        if not result["success"]:
            return jsonify(result), 401

        session["admin_id"] = result["admin"]["id"]
        session["name"] = result["admin"]["full_name"]
        return jsonify(result), 200

    @app.route("/api/admin/logout", methods=["POST"], endpoint="admin_logout")
    def admin_logout():
        session.clear()
        return jsonify({"success": True}), 200
