from __future__ import annotations

from flask import Flask, abort, jsonify, request, send_file

from ..container import Container
from ..core.exceptions import StorageError
from ..handlers import Handlers
from .writers import CsvReportWriter, XlsxReportWriter

_MIMETYPES = {
    CsvReportWriter.extension: CsvReportWriter.mimetype,
    XlsxReportWriter.extension: XlsxReportWriter.mimetype,
}


def register(app: Flask, container: Container) -> None:
    handlers = Handlers(container)

    @app.route("/api/reports/absence-summary", methods=["GET"], endpoint="absence_summary")
    def absence_summary():
        return jsonify(
            handlers.get_absence_summary(
                class_name=request.args.get("class_name"),
                start_date=request.args.get("start_date"),
                end_date=request.args.get("end_date"),
            )
        )

    @app.route("/api/reports/export", methods=["POST"], endpoint="export_absence_report")
    def export_absence_report():
        data = request.get_json(silent=True) or {}
        include_details = data.get("include_details")
        if include_details is None:
            include_details = False
        if not isinstance(include_details, bool):
            return jsonify({"success": False, "message": "include_details must be a boolean"}), 400

        result = handlers.export_absence_report(
            class_name=data.get("class_name"),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            format=data.get("format"),
            include_details=include_details,
        )
        return jsonify(result), (200 if result["success"] else 400)

    prefix = "/" + str(app.config.get("REPORTS_URL_PREFIX", "/reports")).strip("/")

    @app.route(f"{prefix}/<path:filename>", methods=["GET"], endpoint="download_report")
    def download_report(filename: str):
        try:
            path = container.report_storage.resolve(filename)
        except StorageError:
            abort(404)
        mimetype = _MIMETYPES.get(path.suffix.lstrip("."), "application/octet-stream")
        return send_file(path, mimetype=mimetype, as_attachment=True, download_name=path.name)
