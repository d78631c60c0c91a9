from __future__ import annotations

from ...core.constants import DAYS_PER_MONTH
from ...workers.model import Worker
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: monthly salary / 30, truncated toward zero."""

    def __init__(self, days_per_month: int = DAYS_PER_MONTH):
        self._days_per_month = int(days_per_month)

    def daily_wage(self, worker: Worker) -> int:
        # Salaries are never negative, so floor division is truncation.
        return worker.monthly_salary // self._days_per_month


_standard = StandardPayrollCalculator()


def daily_wage(worker: Worker) -> int:
    return _standard.daily_wage(worker)


def total_salary(worker: Worker) -> int:
    return _standard.total_salary(worker)
