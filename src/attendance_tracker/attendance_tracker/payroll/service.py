from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..workers.model import Worker
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    total_payable: int


class PayrollReportService:
    """Read-model for rendering: one row per worker plus the roster-wide total."""

    def __init__(self, *, calculator: Optional[PayrollCalculator] = None):
        self._calculator = calculator or StandardPayrollCalculator()

    def build_roster_report(self, roster: Sequence[Worker]) -> ReportData:
        rows: list[dict] = []
        total_payable = 0

        for w in roster:
            total = self._calculator.total_salary(w)
            rows.append(
                {
                    "name": w.name,
                    "monthly_salary": w.monthly_salary,
                    "daily_wage": self._calculator.daily_wage(w),
                    "days_present": w.days_present,
                    "total_salary": total,
                }
            )
            total_payable += total

        return ReportData(rows=rows, total_payable=total_payable)
