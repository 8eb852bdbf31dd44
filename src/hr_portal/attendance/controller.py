from __future__ import annotations

from flask import Flask, request, session

from ..common.datetime_utils import now_local
from ..common.web import admin_required, employee_required, json_body, ok
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/clock-in", methods=["POST"], endpoint="clock_in")
    @employee_required
    def clock_in():
        result = container.attendance_service.clock_in(session["user_id"], json_body())
        return ok(time=result.time)

    @app.route("/api/attendance/clock-out", methods=["POST"], endpoint="clock_out")
    @employee_required
    def clock_out():
        result = container.attendance_service.clock_out(session["user_id"])
        return ok(time=result.time)

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @employee_required
    def attendance_today():
        record = container.attendance_service.get_today_record(session["user_id"], now_local().date())
        return ok(record=record)

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @employee_required
    def attendance_history():
        try:
            limit = int(request.args.get("limit", DEFAULT_HISTORY_LIMIT))
        except ValueError:
            raise ValidationError("limit must be an integer")
        return ok(records=container.attendance_service.history(session["user_id"], limit=max(limit, 0)))

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_all")
    @admin_required
    def attendance_all():
        return ok(records=container.attendance_service.list_all())
