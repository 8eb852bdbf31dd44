from __future__ import annotations

from flask import Flask, request, session

from ..common.web import admin_required, employee_required, json_body, ok, parse_date_field
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/diary/<work_date>", methods=["PUT"], endpoint="save_diary")
    @employee_required
    def save_diary(work_date: str):
        tasks = json_body().get("tasks")
        if not isinstance(tasks, list):
            raise ValidationError("tasks must be a list")
        entry = container.diary_service.save_entry(
            employee_id=session["user_id"],
            work_date=parse_date_field(work_date, "Date"),
            tasks=tasks,
        )
        return ok(entry=entry)

    @app.route("/api/diary/<work_date>", methods=["GET"], endpoint="get_diary")
    @employee_required
    def get_diary(work_date: str):
        entry = container.diary_service.get_entry(session["user_id"], parse_date_field(work_date, "Date"))
        return ok(entry=entry)

    @app.route("/api/diary", methods=["GET"], endpoint="diary_report")
    @admin_required
    def diary_report():
        work_date = parse_date_field(request.args.get("date"), "Date", required=False)
        return ok(entries=container.diary_service.list_entries(work_date=work_date))
