from __future__ import annotations

from flask import Flask, session

from ..common.web import current_actor, employee_required, login_required, ok
from ..container import Container
from ..core.exceptions import AuthorizationError
from ..users.model import AdminActor


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/<employee_id>/<int:year>/<int:month>", methods=["GET"], endpoint="monthly_statement")
    @login_required
    def monthly_statement(employee_id: str, year: int, month: int):
        actor = current_actor()
        if not isinstance(actor, AdminActor) and actor.user_id != employee_id:
            raise AuthorizationError("Access denied.")
        return ok(statement=container.payroll_service.monthly_statement(employee_id, year=year, month=month))

    @app.route("/api/payroll/deductions", methods=["GET"], endpoint="recent_deductions")
    @employee_required
    def recent_deductions():
        return ok(deductions=container.payroll_service.recent_deductions(session["user_id"]))
