from __future__ import annotations

from datetime import date

import pytest

from hr_portal.core.enums import LeaveStatus, LeaveType
from hr_portal.core.exceptions import EmployeeNotFound, ValidationError
from hr_portal.leaves.model import LeaveRequest
from hr_portal.payroll.calculator.standard_calculator import StandardPayrollCalculator


def _unpaid(container, employee, start, amount, approve=True):
    req = container.leave_service.apply_for_leave(
        employee_id=employee.employee_id, start_date=start, end_date=None, reason="Unpaid day", leave_type="Unpaid"
    )
    if approve:
        return container.leave_service.update_leave_request_status(req.request_id, "Approved", amount)
    return req


def _deduction(amount):
    return LeaveRequest(
        request_id="r",
        employee_id="e",
        employee_name="E",
        start_date=date(2024, 3, 1),
        end_date=date(2024, 3, 1),
        reason="x",
        leave_type=LeaveType.UNPAID,
        status=LeaveStatus.APPROVED,
        deduction_amount=amount,
    )


def test_standard_calculator_never_goes_negative():
    calc = StandardPayrollCalculator()
    assert calc.net_amount(1000, [_deduction(150), _deduction(50)]) == 800
    assert calc.net_amount(100, [_deduction(150)]) == 0
    assert calc.total_deduction([]) == 0


def test_monthly_statement_uses_approved_deductions_of_that_month(container, alice):
    _unpaid(container, alice, date(2024, 3, 11), 150)
    _unpaid(container, alice, date(2024, 3, 20), 50)
    _unpaid(container, alice, date(2024, 4, 2), 300)
    _unpaid(container, alice, date(2024, 3, 25), 999, approve=False)

    statement = container.payroll_service.monthly_statement(alice.employee_id, year=2024, month=3)

    assert statement.salary == 60000
    assert [d.deduction_amount for d in statement.deductions] == [150, 50]
    assert statement.total_deduction == 200
    assert statement.net_amount == 59800


def test_monthly_statement_errors(container, alice):
    with pytest.raises(ValidationError):
        container.payroll_service.monthly_statement(alice.employee_id, year=2024, month=13)
    with pytest.raises(EmployeeNotFound):
        container.payroll_service.monthly_statement("ghost", year=2024, month=3)


def test_recent_deductions_latest_first(container, alice):
    for day, amount in ((1, 10), (5, 20), (9, 30), (13, 40)):
        _unpaid(container, alice, date(2024, 3, day), amount)
    _unpaid(container, alice, date(2024, 3, 20), 0)

    recent = container.payroll_service.recent_deductions(alice.employee_id)
    assert [d.deduction_amount for d in recent] == [40, 30, 20]
