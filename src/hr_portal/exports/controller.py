from __future__ import annotations

from flask import Flask, Response

from ..common.datetime_utils import now_local
from ..common.web import admin_required
from ..container import Container


def _csv_response(content: str, prefix: str) -> Response:
    if not content:
        return Response(status=204)
    filename = f"{prefix}_{now_local():%Y-%m-%d}.csv"
    return Response(
        content,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/exports/attendance.csv", methods=["GET"], endpoint="export_attendance")
    @admin_required
    def export_attendance():
        return _csv_response(container.export_service.attendance_csv(), "attendance_report")

    @app.route("/api/exports/leaves.csv", methods=["GET"], endpoint="export_leaves")
    @admin_required
    def export_leaves():
        return _csv_response(container.export_service.leave_csv(), "leave_report")
