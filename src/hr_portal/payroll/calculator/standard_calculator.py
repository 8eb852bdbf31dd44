from __future__ import annotations

from typing import Sequence

from .base import PayrollCalculator
from ...leaves.model import LeaveRequest


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: salary - recorded unpaid-leave deductions, not below 0."""

    def total_deduction(self, deductions: Sequence[LeaveRequest]) -> float:
        return float(sum(d.deduction_amount or 0 for d in deductions))

    def net_amount(self, salary: float, deductions: Sequence[LeaveRequest]) -> float:
        return max(float(salary) - self.total_deduction(deductions), 0.0)
