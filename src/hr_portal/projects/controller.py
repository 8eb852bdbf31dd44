from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import employee_required, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/projects", methods=["GET"], endpoint="list_projects")
    @employee_required
    def list_projects():
        return ok(projects=container.project_service.list_for_employee(session["user_id"]))

    @app.route("/api/projects", methods=["POST"], endpoint="add_project")
    @employee_required
    def add_project():
        body = json_body()
        project = container.project_service.add_project(
            employee_id=session["user_id"],
            project_name=body.get("projectName", ""),
            description=body.get("description", ""),
            status=body.get("status"),
            file_name=body.get("fileName"),
        )
        return ok(201, project=project)

    @app.route("/api/projects/<project_id>", methods=["PUT"], endpoint="update_project")
    @employee_required
    def update_project(project_id: str):
        body = json_body()
        project = container.project_service.update_project(
            employee_id=session["user_id"],
            project_id=project_id,
            project_name=body.get("projectName"),
            description=body.get("description"),
            status=body.get("status"),
            file_name=body.get("fileName"),
        )
        return ok(project=project)

    @app.route("/api/projects/<project_id>", methods=["DELETE"], endpoint="delete_project")
    @employee_required
    def delete_project(project_id: str):
        container.project_service.delete_project(employee_id=session["user_id"], project_id=project_id)
        return jsonify({"success": True})
