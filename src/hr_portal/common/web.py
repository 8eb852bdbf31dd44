from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date, datetime, time
from enum import Enum
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.model import Actor, actor_for
from .datetime_utils import format_time_of_day, format_timestamp, parse_calendar_date

# Never sent to clients.
_HIDDEN_FIELDS = {"password_hash"}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_payload(value: Any) -> Any:
    """Dataclasses -> camelCase dicts, enums -> values, dates/times -> strings."""
    if is_dataclass(value) and not isinstance(value, type):
        return {
            _camel(f.name): to_payload(getattr(value, f.name))
            for f in fields(value)
            if f.name not in _HIDDEN_FIELDS
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, time):
        return format_time_of_day(value)
    if isinstance(value, (list, tuple)):
        return [to_payload(v) for v in value]
    if isinstance(value, dict):
        return {k: to_payload(v) for k, v in value.items()}
    return value


def ok(status: int = 200, **data):
    return jsonify({"success": True, **{k: to_payload(v) for k, v in data.items()}}), status


def json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def parse_date_field(value: Optional[str], field_name: str, *, required: bool = True) -> Optional[date]:
    if not value:
        if required:
            raise ValidationError(f"{field_name} is required")
        return None
    try:
        # Older clients send full ISO timestamps.
        return parse_calendar_date(str(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def current_actor() -> Actor:
    return actor_for(Role(session["role"]), session["user_id"])


def _unauthorized():
    return jsonify({"success": False, "message": "Please log in to continue."}), 401


def _forbidden():
    return jsonify({"success": False, "message": "Access denied."}), 403


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return _unauthorized()
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return _unauthorized()
        if session.get("role") != Role.ADMIN.value:
            return _forbidden()
        return view(*args, **kwargs)

    return wrapper


def employee_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return _unauthorized()
        if session.get("role") != Role.EMPLOYEE.value:
            return _forbidden()
        return view(*args, **kwargs)

    return wrapper
