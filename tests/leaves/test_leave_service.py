from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

import pytest

from hr_portal.common.datetime_utils import parse_calendar_date
from hr_portal.core.enums import AttendanceStatus, LeaveStatus, LeaveType
from hr_portal.core.exceptions import EmployeeNotFound, QuotaExceeded, RequestNotFound, ValidationError
from hr_portal.leaves.json_leave_repository import JsonLeaveRequestRepository


def _apply(container, employee, start, end=None, leave_type="Paid", reason="Personal"):
    return container.leave_service.apply_for_leave(
        employee_id=employee.employee_id,
        start_date=start,
        end_date=end,
        reason=reason,
        leave_type=leave_type,
    )


def _attendance_for(container, employee):
    rows = [r for r in container.attendance_repo.list_all() if r.employee_id == employee.employee_id]
    return sorted(rows, key=lambda r: r.work_date)


def test_new_request_is_pending_and_end_defaults_to_start(container, alice):
    req = _apply(container, alice, date(2024, 3, 11))

    assert req.status == LeaveStatus.PENDING
    assert req.leave_type == LeaveType.PAID
    assert req.end_date == date(2024, 3, 11)
    assert req.employee_name == "Alice Johnson"
    assert req.deduction_amount is None


def test_second_paid_leave_in_same_month_is_rejected(container, alice):
    _apply(container, alice, date(2024, 3, 11))

    with pytest.raises(QuotaExceeded) as exc:
        _apply(container, alice, date(2024, 3, 25))
    assert str(exc.value) == "A paid leave has already been requested or approved for this month."


def test_paid_leave_in_next_month_is_allowed(container, alice):
    _apply(container, alice, date(2024, 3, 11))
    req = _apply(container, alice, date(2024, 4, 2))
    assert req.status == LeaveStatus.PENDING


def test_same_month_in_another_year_is_allowed(container, alice):
    _apply(container, alice, date(2024, 3, 11))
    assert _apply(container, alice, date(2025, 3, 11)).status == LeaveStatus.PENDING


def test_quota_uses_start_month_only(container, alice):
    _apply(container, alice, date(2024, 3, 30), date(2024, 4, 2))
    assert _apply(container, alice, date(2024, 4, 10)).status == LeaveStatus.PENDING


def test_rejected_paid_leave_frees_the_quota(container, alice):
    first = _apply(container, alice, date(2024, 3, 11))
    container.leave_service.update_leave_request_status(first.request_id, "Rejected")

    assert _apply(container, alice, date(2024, 3, 20)).status == LeaveStatus.PENDING


def test_unpaid_leave_is_not_limited(container, alice):
    _apply(container, alice, date(2024, 3, 11))
    _apply(container, alice, date(2024, 3, 12), leave_type="Unpaid")
    _apply(container, alice, date(2024, 3, 13), leave_type="Unpaid")
    assert len(container.leave_service.list_for_employee(alice.employee_id)) == 3


def test_quota_is_per_employee(container, alice):
    bob = container.employee_service.add_employee(
        name="Bob Smith", username="bob", position="Manager", salary=75000, password="password123"
    )
    _apply(container, alice, date(2024, 3, 11))
    assert _apply(container, bob, date(2024, 3, 11)).status == LeaveStatus.PENDING


def test_invalid_requests_are_rejected(container, alice):
    with pytest.raises(ValidationError):
        _apply(container, alice, date(2024, 3, 11), date(2024, 3, 10))
    with pytest.raises(ValidationError):
        _apply(container, alice, date(2024, 3, 11), reason="   ")
    with pytest.raises(ValidationError):
        _apply(container, alice, date(2024, 3, 11), leave_type="Sabbatical")
    with pytest.raises(EmployeeNotFound):
        container.leave_service.apply_for_leave(
            employee_id="ghost", start_date=date(2024, 3, 11), end_date=None, reason="x", leave_type="Paid"
        )


def test_approval_marks_every_day_on_leave(container, alice):
    req = _apply(container, alice, date(2024, 3, 11), date(2024, 3, 13))

    updated = container.leave_service.update_leave_request_status(req.request_id, "Approved")

    assert updated.status == LeaveStatus.APPROVED
    rows = _attendance_for(container, alice)
    assert [r.work_date for r in rows] == [date(2024, 3, 11), date(2024, 3, 12), date(2024, 3, 13)]
    assert all(r.status == AttendanceStatus.ON_LEAVE for r in rows)
    assert all(r.clock_in is None and r.clock_out is None for r in rows)


def test_approval_keeps_recorded_clock_times(container, alice, office):
    container.attendance_service.clock_in(
        alice.employee_id,
        {"latitude": office.latitude, "longitude": office.longitude},
        now=datetime(2024, 3, 11, 9, 0),
    )
    req = _apply(container, alice, date(2024, 3, 11), date(2024, 3, 12), leave_type="Unpaid")

    container.leave_service.update_leave_request_status(req.request_id, "Approved")

    rows = _attendance_for(container, alice)
    assert len(rows) == 2
    assert rows[0].status == AttendanceStatus.ON_LEAVE
    assert rows[0].clock_in == time(9, 0)


def test_deduction_only_for_unpaid_positive_amounts(container, alice):
    unpaid = _apply(container, alice, date(2024, 3, 11), leave_type="Unpaid")
    paid = _apply(container, alice, date(2024, 3, 12), leave_type="Paid")
    zero = _apply(container, alice, date(2024, 3, 13), leave_type="Unpaid")

    assert container.leave_service.update_leave_request_status(unpaid.request_id, "Approved", 150).deduction_amount == 150
    assert container.leave_service.update_leave_request_status(paid.request_id, "Approved", 150).deduction_amount is None
    assert container.leave_service.update_leave_request_status(zero.request_id, "Approved", 0).deduction_amount is None

    stored = {r.request_id: r for r in container.leave_service.list_all()}
    assert stored[unpaid.request_id].deduction_amount == 150


def test_rejection_leaves_attendance_untouched(container, alice):
    req = _apply(container, alice, date(2024, 3, 11), date(2024, 3, 13), leave_type="Unpaid")

    updated = container.leave_service.update_leave_request_status(req.request_id, "Rejected", 200)

    assert updated.status == LeaveStatus.REJECTED
    assert updated.deduction_amount is None
    assert _attendance_for(container, alice) == []


def test_decision_can_be_changed_after_the_fact(container, alice):
    req = _apply(container, alice, date(2024, 3, 11))
    container.leave_service.update_leave_request_status(req.request_id, "Rejected")

    updated = container.leave_service.update_leave_request_status(req.request_id, "Approved")

    assert updated.status == LeaveStatus.APPROVED
    assert len(_attendance_for(container, alice)) == 1


def test_status_update_errors(container, alice):
    req = _apply(container, alice, date(2024, 3, 11))

    with pytest.raises(ValidationError):
        container.leave_service.update_leave_request_status(req.request_id, "Pending")
    with pytest.raises(ValidationError):
        container.leave_service.update_leave_request_status(req.request_id, "Maybe")
    with pytest.raises(RequestNotFound):
        container.leave_service.update_leave_request_status("missing", "Approved")


def test_pending_list_and_ordering(container, alice):
    a = _apply(container, alice, date(2024, 3, 11))
    b = _apply(container, alice, date(2024, 4, 11))
    container.leave_service.update_leave_request_status(a.request_id, "Approved")

    assert [r.request_id for r in container.leave_service.list_pending()] == [b.request_id]
    assert [r.request_id for r in container.leave_service.list_all()] == [b.request_id, a.request_id]


def test_calendar_date_of_a_timestamp_uses_the_local_day():
    ist = timezone(timedelta(hours=5, minutes=30))
    assert parse_calendar_date("2024-01-31T18:30:00.000Z", ist) == date(2024, 2, 1)
    assert parse_calendar_date("2024-01-31T18:30:00.000Z", timezone.utc) == date(2024, 1, 31)
    assert parse_calendar_date("2024-01-31") == date(2024, 1, 31)


def test_stored_timestamp_counts_toward_its_local_month(container, alice, store, india_local_time):
    with store.transaction() as doc:
        doc["leaveRequests"].append(
            {
                "id": "legacy-1",
                "employeeId": alice.employee_id,
                "employeeName": alice.name,
                "startDate": "2024-01-31T18:30:00.000Z",
                "endDate": "2024-01-31T18:30:00.000Z",
                "reason": "Wedding",
                "leaveType": "Paid",
                "status": "Pending",
            }
        )

    legacy = JsonLeaveRequestRepository(store).get("legacy-1")
    assert (legacy.start_date, legacy.end_date) == (date(2024, 2, 1), date(2024, 2, 1))

    with pytest.raises(QuotaExceeded):
        _apply(container, alice, date(2024, 2, 20))
    assert _apply(container, alice, date(2024, 1, 20)).status == LeaveStatus.PENDING

    container.leave_service.update_leave_request_status("legacy-1", "Approved")
    assert [r.work_date for r in _attendance_for(container, alice)] == [date(2024, 2, 1)]
