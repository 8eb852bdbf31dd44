from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Type, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value.strip()) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value.strip()


def require_password(value: str, min_len: int) -> str:
    # Passwords are not stripped.
    if value is None or len(value) < min_len:
        raise ValidationError(f"Password must be at least {min_len} characters")
    return value


def require_number_in_range(value, field_name: str, *, minimum: float, maximum: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if number != number or number < minimum or number > maximum:
        raise ValidationError(f"{field_name} must be between {minimum:g} and {maximum:g}")
    return number


def require_non_negative(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if number != number or number < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return number


def require_decimal_string(value: str, field_name: str) -> str:
    """Hours are kept as strings; they must still parse as a non-negative decimal."""
    text = (value or "").strip()
    try:
        number = Decimal(text)
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a decimal number")
    if not number.is_finite() or number < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return text


def require_enum(enum_cls: Type[E], value, field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")
