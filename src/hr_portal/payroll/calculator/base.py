from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...leaves.model import LeaveRequest


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def total_deduction(self, deductions: Sequence[LeaveRequest]) -> float:
        raise NotImplementedError

    @abstractmethod
    def net_amount(self, salary: float, deductions: Sequence[LeaveRequest]) -> float:
        raise NotImplementedError
