"""Pure roster transforms.

Every function takes a roster (or a single worker) and returns a new value;
nothing here touches storage. The caller owns the mutable state and persists
the result.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional, Sequence

from ..common.validators import digits_only, parse_salary, require_non_empty, require_positive
from ..core.exceptions import ValidationError
from ..payroll.calculator.standard_calculator import daily_wage, total_salary
from .model import Roster, Worker

logger = logging.getLogger(__name__)

WorkerPatch = Callable[[Worker], Worker]

__all__ = [
    "add_worker",
    "can_submit_new_worker",
    "daily_wage",
    "delete_worker",
    "edit_salary",
    "find_worker",
    "mark_absent",
    "mark_present",
    "parse_new_salary",
    "reset_attendance",
    "total_salary",
    "update_worker",
]


def find_worker(roster: Sequence[Worker], name: str) -> Optional[Worker]:
    for worker in roster:
        if worker.name == name:
            return worker
    return None


def add_worker(roster: Sequence[Worker], name: str, salary: int) -> Roster:
    """Append a new worker with no attendance.

    Blank names, non-positive salaries and names already on the roster are
    ignored: the roster comes back unchanged and nothing is raised.
    """

    roster = tuple(roster)
    try:
        clean_name = require_non_empty(name, "Worker name")
        salary = require_positive(salary, "Monthly salary")
    except ValidationError as exc:
        logger.debug("add_worker ignored: %s", exc)
        return roster

    if find_worker(roster, clean_name) is not None:
        logger.debug("add_worker ignored: %r already on the roster", clean_name)
        return roster

    return roster + (Worker(name=clean_name, monthly_salary=salary),)


def update_worker(roster: Sequence[Worker], name: str, patch: WorkerPatch) -> Roster:
    out: list[Worker] = []
    for worker in roster:
        if worker.name != name:
            out.append(worker)
            continue

        patched = patch(worker)
        if patched.name != worker.name:
            logger.debug("update_worker ignored rename of %r to %r", worker.name, patched.name)
            patched = worker
        out.append(patched)
    return tuple(out)


def delete_worker(roster: Sequence[Worker], name: str) -> Roster:
    return tuple(w for w in roster if w.name != name)


def mark_present(worker: Worker) -> Worker:
    return replace(worker, days_present=worker.days_present + 1)


def mark_absent(worker: Worker) -> Worker:
    if worker.days_present <= 0:
        return worker
    return replace(worker, days_present=worker.days_present - 1)


def reset_attendance(roster: Sequence[Worker]) -> Roster:
    return tuple(replace(w, days_present=0) for w in roster)


def edit_salary(worker: Worker, text: Optional[str]) -> Worker:
    """Apply a salary edit typed by the user; unparseable text keeps the old salary."""
    salary = parse_salary(text, worker.monthly_salary)
    if salary == worker.monthly_salary:
        return worker
    return replace(worker, monthly_salary=salary)


def parse_new_salary(text: Optional[str]) -> int:
    """Salary typed into the add form: only digits count, empty means 0."""
    return parse_salary(digits_only(text), 0)


def can_submit_new_worker(name_text: Optional[str], salary_text: Optional[str]) -> bool:
    return bool(name_text and name_text.strip()) and bool(digits_only(salary_text))
