from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import now_local
from ..common.web import current_actor, login_required, ok
from ..container import Container
from ..users.model import AdminActor


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        actor = current_actor()
        today = now_local().date()
        if isinstance(actor, AdminActor):
            return ok(stats=container.dashboard_service.admin_stats(today))
        return ok(summary=container.dashboard_service.employee_summary(actor.user_id, today))
