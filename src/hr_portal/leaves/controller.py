from __future__ import annotations

from flask import Flask, request, session

from ..common.validators import require_non_negative
from ..common.web import admin_required, current_actor, employee_required, json_body, login_required, ok, parse_date_field
from ..container import Container
from ..users.model import AdminActor


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves", methods=["POST"], endpoint="apply_for_leave")
    @employee_required
    def apply_for_leave():
        body = json_body()
        leave = container.leave_service.apply_for_leave(
            employee_id=session["user_id"],
            start_date=parse_date_field(body.get("startDate"), "Start date"),
            end_date=parse_date_field(body.get("endDate"), "End date", required=False),
            reason=body.get("reason", ""),
            leave_type=body.get("leaveType"),
        )
        return ok(201, request=leave)

    @app.route("/api/leaves", methods=["GET"], endpoint="list_leaves")
    @login_required
    def list_leaves():
        actor = current_actor()
        if not isinstance(actor, AdminActor):
            return ok(requests=container.leave_service.list_for_employee(actor.user_id))
        if request.args.get("status") == "Pending":
            return ok(requests=container.leave_service.list_pending())
        return ok(requests=container.leave_service.list_all())

    @app.route("/api/leaves/<request_id>/status", methods=["PUT"], endpoint="update_leave_status")
    @admin_required
    def update_leave_status(request_id: str):
        body = json_body()
        amount = body.get("deductionAmount")
        deduction = require_non_negative(amount, "Deduction amount") if amount not in (None, "") else None
        leave = container.leave_service.update_leave_request_status(request_id, body.get("status"), deduction)
        return ok(request=leave)
