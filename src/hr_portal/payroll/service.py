from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.constants import DEFAULT_RECENT_LIMIT
from ..core.enums import LeaveStatus
from ..core.exceptions import EmployeeNotFound, ValidationError
from ..leaves.model import LeaveRequest
from ..leaves.repository import LeaveRequestRepository
from ..users.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator


@dataclass(frozen=True)
class MonthlyStatement:
    employee_id: str
    employee_name: str
    year: int
    month: int
    salary: float
    deductions: List[LeaveRequest]
    total_deduction: float
    net_amount: float


def _is_deduction(req: LeaveRequest) -> bool:
    return req.status == LeaveStatus.APPROVED and bool(req.deduction_amount and req.deduction_amount > 0)


class PayrollService:
    def __init__(
        self,
        employees: EmployeeRepository,
        leaves: LeaveRequestRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._leaves = leaves
        self._calculator = calculator or StandardPayrollCalculator()

    def recent_deductions(self, employee_id: str, *, limit: int = DEFAULT_RECENT_LIMIT) -> Sequence[LeaveRequest]:
        deductions = [r for r in self._leaves.list_for_employee(employee_id) if _is_deduction(r)]
        deductions.sort(key=lambda r: r.start_date, reverse=True)
        return deductions[:limit]

    def monthly_statement(self, employee_id: str, *, year: int, month: int) -> MonthlyStatement:
        if not 1 <= int(month) <= 12:
            raise ValidationError("Month must be between 1 and 12")

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFound()

        # A deduction belongs to the month its leave starts in.
        deductions = [
            r
            for r in self._leaves.list_for_employee(employee_id)
            if _is_deduction(r) and (r.start_date.year, r.start_date.month) == (int(year), int(month))
        ]
        deductions.sort(key=lambda r: r.start_date)

        return MonthlyStatement(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            year=int(year),
            month=int(month),
            salary=employee.salary,
            deductions=deductions,
            total_deduction=self._calculator.total_deduction(deductions),
            net_amount=self._calculator.net_amount(employee.salary, deductions),
        )
