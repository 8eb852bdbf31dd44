from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .config import get_settings_module
from .container import Container, build_container
from .core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

from .attendance.controller import register as register_attendance
from .chat.controller import register as register_chat
from .dashboard.controller import register as register_dashboard
from .diary.controller import register as register_diary
from .exports.controller import register as register_exports
from .leaves.controller import register as register_leaves
from .office.controller import register as register_office
from .payroll.controller import register as register_payroll
from .projects.controller import register as register_projects
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (NotFoundError, 404),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (PersistenceError, 500),
)


def _status_for(error: DomainError) -> int:
    for error_cls, status in _STATUS_BY_ERROR:
        if isinstance(error, error_cls):
            return status
    return 400


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    data_file = getattr(settings, "DATA_FILE", None)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s data_file=%s", settings_module, data_file or "<memory>")

    if container is None:
        container = build_container(data_file=data_file)
    app.extensions["hr_portal"] = container

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = _status_for(e)
        if status >= 500:
            logger.error("Request failed: %s", e)
        return jsonify({"success": False, "message": str(e)}), status

    register_users(app, container)
    register_attendance(app, container)
    register_leaves(app, container)
    register_chat(app, container)
    register_diary(app, container)
    register_projects(app, container)
    register_office(app, container)
    register_payroll(app, container)
    register_exports(app, container)
    register_dashboard(app, container)

    return app
