from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Worker:
    """Domain entity: one tracked worker.

    ``name`` is the roster key; there is no separate id and renames are not supported.
    """

    name: str
    monthly_salary: int = 0
    days_present: int = 0


Roster = tuple[Worker, ...]
