from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..handlers import Handlers


def register(app: Flask, container: Container) -> None:
    handlers = Handlers(container)

    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        return jsonify(handlers.get_dashboard_stats())
