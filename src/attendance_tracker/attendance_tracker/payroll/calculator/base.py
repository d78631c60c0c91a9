from __future__ import annotations

from abc import ABC, abstractmethod

from ...workers.model import Worker


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def daily_wage(self, worker: Worker) -> int:
        raise NotImplementedError

    def total_salary(self, worker: Worker) -> int:
        return self.daily_wage(worker) * worker.days_present
