from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, json_body, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="get_settings")
    @login_required
    def get_settings():
        return ok(settings=container.office_service.get_settings())

    @app.route("/api/settings", methods=["PUT"], endpoint="update_settings")
    @admin_required
    def update_settings():
        body = json_body()
        location = body.get("officeLocation") or {}
        settings = container.office_service.update_settings(
            latitude=location.get("latitude"),
            longitude=location.get("longitude"),
            clock_in_radius=body.get("clockInRadius"),
        )
        return ok(settings=settings)
