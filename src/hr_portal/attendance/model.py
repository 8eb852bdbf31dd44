from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row per employee per calendar day."""

    attendance_id: str
    employee_id: str
    employee_name: str
    work_date: date
    clock_in: Optional[time]
    clock_out: Optional[time]
    status: AttendanceStatus


@dataclass(frozen=True)
class ClockResult:
    """Time recorded by a clock-in/out, formatted HH:MM:SS."""

    time: str
