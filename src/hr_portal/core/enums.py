from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Actor role used for authorization."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Daily attendance status as persisted in the document."""

    PRESENT = "Present"
    ABSENT = "Absent"
    ON_LEAVE = "On Leave"


class LeaveType(str, Enum):
    PAID = "Paid"
    UNPAID = "Unpaid"


class LeaveStatus(str, Enum):
    """Leave approval flow: Pending -> Approved | Rejected."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class DiaryTaskStatus(str, Enum):
    NOT_STARTED = "Not Started"
    ON_SCHEDULE = "On schedule"
    AHEAD = "Ahead"
    BEHIND = "Behind"


class ProjectStatus(str, Enum):
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"
