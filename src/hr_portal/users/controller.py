from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.web import admin_required, current_actor, json_body, login_required, ok
from ..container import Container
from ..core.exceptions import AuthorizationError
from .model import AdminActor

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        actor = container.auth_service.authenticate(body.get("username", ""), body.get("password", ""))

        session.clear()
        session["user_id"] = actor.user_id
        session["role"] = actor.role.value
        logger.info("User %s logged in as %s", actor.user_id, actor.role.value)
        return ok(user={"id": actor.user_id, "role": actor.role})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        actor = current_actor()
        if isinstance(actor, AdminActor):
            profile = container.admin_service.get_admin(actor.user_id)
        else:
            profile = container.employee_service.get_employee(actor.user_id)
        return ok(role=actor.role, profile=profile)

    # --- employees ---

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @admin_required
    def list_employees():
        return ok(employees=container.employee_service.list_employees())

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @admin_required
    def add_employee():
        body = json_body()
        employee = container.employee_service.add_employee(
            name=body.get("name", ""),
            username=body.get("username", ""),
            position=body.get("position", ""),
            salary=body.get("salary"),
            password=body.get("password", ""),
        )
        return ok(201, employee=employee)

    @app.route("/api/employees", methods=["DELETE"], endpoint="clear_employees")
    @admin_required
    def clear_employees():
        container.employee_service.clear_all()
        return jsonify({"success": True})

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @login_required
    def get_employee(employee_id: str):
        actor = current_actor()
        if not isinstance(actor, AdminActor) and actor.user_id != employee_id:
            raise AuthorizationError("Access denied.")
        return ok(employee=container.employee_service.get_employee(employee_id))

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @admin_required
    def update_employee(employee_id: str):
        body = json_body()
        employee = container.employee_service.update_employee(
            employee_id,
            name=body.get("name"),
            username=body.get("username"),
            position=body.get("position"),
            salary=body.get("salary"),
            password=body.get("password"),
        )
        return ok(employee=employee)

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="remove_employee")
    @admin_required
    def remove_employee(employee_id: str):
        container.employee_service.remove_employee(employee_id)
        return jsonify({"success": True})

    @app.route("/api/employees/<employee_id>/avatar", methods=["PUT"], endpoint="update_employee_avatar")
    @login_required
    def update_employee_avatar(employee_id: str):
        employee = container.employee_service.update_avatar(current_actor(), employee_id, json_body().get("avatar", ""))
        return ok(employee=employee)

    # --- admin profiles ---

    @app.route("/api/admins", methods=["GET"], endpoint="list_admins")
    @admin_required
    def list_admins():
        return ok(admins=container.admin_service.list_admins())

    @app.route("/api/admins", methods=["POST"], endpoint="add_admin")
    @admin_required
    def add_admin():
        body = json_body()
        admin = container.admin_service.add_admin(
            name=body.get("name", ""),
            username=body.get("username", ""),
            password=body.get("password", ""),
        )
        return ok(201, admin=admin)

    @app.route("/api/admins/<admin_id>", methods=["GET"], endpoint="get_admin")
    @admin_required
    def get_admin(admin_id: str):
        return ok(admin=container.admin_service.get_admin(admin_id))

    @app.route("/api/admins/<admin_id>", methods=["PUT"], endpoint="update_admin")
    @admin_required
    def update_admin(admin_id: str):
        body = json_body()
        admin = container.admin_service.update_profile(
            admin_id,
            name=body.get("name"),
            username=body.get("username"),
            password=body.get("password"),
        )
        return ok(admin=admin)

    @app.route("/api/admins/<admin_id>/avatar", methods=["PUT"], endpoint="update_admin_avatar")
    @admin_required
    def update_admin_avatar(admin_id: str):
        return ok(admin=container.admin_service.update_avatar(admin_id, json_body().get("avatar", "")))
