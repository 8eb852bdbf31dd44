"""Example: drive the service layer directly (no Flask).

Controllers are thin; the rules live in the services.
"""

from datetime import date, datetime

from hr_portal.container import build_container


def main():
    container = build_container(data_file=None)

    alice = container.employee_service.add_employee(
        name="Alice Johnson", username="alice", position="Engineer", salary=60000, password="password123"
    )

    office = container.office_service.get_settings().office_location
    print(container.attendance_service.clock_in(
        alice.employee_id,
        {"latitude": office.latitude, "longitude": office.longitude},
        now=datetime(2024, 3, 4, 9, 0),
    ))

    leave = container.leave_service.apply_for_leave(
        employee_id=alice.employee_id,
        start_date=date(2024, 3, 11),
        end_date=date(2024, 3, 12),
        reason="Family event",
        leave_type="Unpaid",
    )
    container.leave_service.update_leave_request_status(leave.request_id, "Approved", 150)

    print(container.export_service.leave_csv())
    print(container.payroll_service.monthly_statement(alice.employee_id, year=2024, month=3))


if __name__ == "__main__":
    main()
