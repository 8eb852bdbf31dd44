from __future__ import annotations

import logging
import math
from contextlib import nullcontext
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, ContextManager, Optional, Sequence

from ..common.datetime_utils import format_time_of_day, now_local
from ..common.geo import distance_meters, to_geo_point
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyClockedIn, AlreadyClockedOut, EmployeeNotFound, GeofenceViolation, NotClockedIn
from ..database.json_base import new_id
from ..office.repository import OfficeSettingsRepository
from ..users.repository import EmployeeRepository
from .model import AttendanceRecord, ClockResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        office: OfficeSettingsRepository,
        *,
        atomic: Optional[Callable[[], ContextManager]] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._office = office
        self._atomic = atomic or nullcontext

    def clock_in(self, employee_id: str, location, *, now: datetime | None = None) -> ClockResult:
        now = now or now_local()
        today = now.date()
        point = to_geo_point(location)

        with self._atomic():
            settings = self._office.get()
            distance = distance_meters(point, settings.office_location)
            # Compared in whole meters, rounded half-up.
            rounded = int(math.floor(distance + 0.5))
            if rounded > settings.clock_in_radius:
                logger.info("Clock-in rejected for %s: %.1fm from office (radius %sm)", employee_id, distance, settings.clock_in_radius)
                raise GeofenceViolation(radius=settings.clock_in_radius, distance=rounded)

            employee = self._employees.get_by_id(employee_id)
            if not employee:
                raise EmployeeNotFound()

            clock_in = now.time().replace(microsecond=0)
            existing = self._attendance.get_for_employee_and_date(employee_id, today)
            if existing:
                if existing.clock_in is not None:
                    raise AlreadyClockedIn()
                record = replace(existing, clock_in=clock_in, status=AttendanceStatus.PRESENT)
            else:
                record = AttendanceRecord(
                    attendance_id=new_id(),
                    employee_id=employee_id,
                    employee_name=employee.name,
                    work_date=today,
                    clock_in=clock_in,
                    clock_out=None,
                    status=AttendanceStatus.PRESENT,
                )
            self._attendance.save(record)

        logger.info("Employee %s clocked in at %s", employee_id, clock_in)
        return ClockResult(time=format_time_of_day(clock_in))

    def clock_out(self, employee_id: str, *, now: datetime | None = None) -> ClockResult:
        now = now or now_local()
        today = now.date()

        with self._atomic():
            record = self._attendance.get_for_employee_and_date(employee_id, today)
            if not record or record.clock_in is None:
                raise NotClockedIn()
            if record.clock_out is not None:
                raise AlreadyClockedOut()

            clock_out = now.time().replace(microsecond=0)
            # Status stays as recorded at clock-in.
            self._attendance.save(replace(record, clock_out=clock_out))

        logger.info("Employee %s clocked out at %s", employee_id, clock_out)
        return ClockResult(time=format_time_of_day(clock_out))

    def get_today_record(self, employee_id: str, today: date) -> Optional[AttendanceRecord]:
        """Get today's attendance record for an employee"""
        return self._attendance.get_for_employee_and_date(employee_id, today)

    def history(self, employee_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[AttendanceRecord]:
        return self._attendance.get_recent_for_employee(employee_id, limit)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return sorted(self._attendance.list_all(), key=lambda r: r.work_date, reverse=True)
