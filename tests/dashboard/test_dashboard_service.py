from __future__ import annotations

from datetime import date, datetime


def test_admin_stats(container, alice, office, fixed_now):
    container.employee_service.add_employee(
        name="Bob Smith", username="bob", position="Manager", salary=75000, password="password123"
    )
    container.attendance_service.clock_in(
        alice.employee_id, {"latitude": office.latitude, "longitude": office.longitude}, now=fixed_now
    )
    container.leave_service.apply_for_leave(
        employee_id=alice.employee_id, start_date=date(2024, 3, 20), end_date=None, reason="Trip", leave_type="Paid"
    )

    stats = container.dashboard_service.admin_stats(fixed_now.date())

    assert stats.total_employees == 2
    assert stats.present_today == 1
    assert stats.absent_today == 1
    assert stats.pending_leaves == 1


def test_on_leave_does_not_count_as_present(container, alice, fixed_now):
    req = container.leave_service.apply_for_leave(
        employee_id=alice.employee_id, start_date=fixed_now.date(), end_date=None, reason="Sick", leave_type="Paid"
    )
    container.leave_service.update_leave_request_status(req.request_id, "Approved")

    stats = container.dashboard_service.admin_stats(fixed_now.date())
    assert (stats.present_today, stats.absent_today, stats.pending_leaves) == (0, 1, 0)


def test_employee_summary(container, alice, office):
    location = {"latitude": office.latitude, "longitude": office.longitude}
    for day in range(1, 6):
        container.attendance_service.clock_in(alice.employee_id, location, now=datetime(2024, 3, day, 9, 0))
    req = container.leave_service.apply_for_leave(
        employee_id=alice.employee_id, start_date=date(2024, 3, 20), end_date=None, reason="Errand", leave_type="Unpaid"
    )
    container.leave_service.update_leave_request_status(req.request_id, "Approved", 75)

    summary = container.dashboard_service.employee_summary(alice.employee_id, date(2024, 3, 5))

    assert summary.today.work_date == date(2024, 3, 5)
    assert [r.work_date.day for r in summary.recent_attendance] == [20, 5, 4]
    assert [r.request_id for r in summary.recent_leaves] == [req.request_id]
    assert [d.deduction_amount for d in summary.recent_deductions] == [75]
