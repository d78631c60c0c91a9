from __future__ import annotations

import asyncio
import logging
from typing import Callable, Iterable, Optional, Sequence

from ..core.constants import RESET_CONFIRM_MESSAGE
from ..payroll.service import PayrollReportService, ReportData
from ..persistence.write_queue import SaveQueue
from . import roster as ops
from .model import Roster, Worker
from .repository import WorkerRepository

logger = logging.getLogger(__name__)

ChangeListener = Callable[[Roster], None]


def build_default_roster(pairs: Iterable[tuple[str, int]]) -> Roster:
    return tuple(Worker(name=name, monthly_salary=int(salary)) for name, salary in pairs)


class RosterService:
    """Use case: own the live roster and persist every change.

    Mutations are synchronous; the save is handed to the SaveQueue and never
    awaited here. ``on_workers_change`` and ``on_reset_attendance`` are the two
    callbacks a presentation layer is given.
    """

    reset_prompt = RESET_CONFIRM_MESSAGE

    def __init__(
        self,
        workers: WorkerRepository,
        save_queue: SaveQueue,
        *,
        default_roster: Sequence[Worker] = (),
        report_service: Optional[PayrollReportService] = None,
        on_change: Optional[ChangeListener] = None,
    ):
        self._workers_repo = workers
        self._save_queue = save_queue
        self._default_roster = tuple(default_roster)
        self._reports = report_service or PayrollReportService()
        self._on_change = on_change
        self._roster: Roster = ()

    @property
    def workers(self) -> Roster:
        return self._roster

    async def start(self) -> Roster:
        saved = await asyncio.to_thread(self._workers_repo.load)
        if saved:
            self._roster = tuple(saved)
        else:
            logger.info("no stored roster, seeding %d default workers", len(self._default_roster))
            self._roster = self._default_roster
            self._save_queue.submit(self._roster)
        self._notify()
        return self._roster

    async def flush(self) -> None:
        await self._save_queue.join()

    async def close(self) -> None:
        await self._save_queue.aclose()

    def on_workers_change(self, workers: Sequence[Worker]) -> None:
        self._roster = tuple(workers)
        self._save_queue.submit(self._roster)
        self._notify()

    def on_reset_attendance(self) -> None:
        self.on_workers_change(ops.reset_attendance(self._roster))

    def add_worker(self, name: str, salary_text: str) -> bool:
        if not ops.can_submit_new_worker(name, salary_text):
            return False

        updated = ops.add_worker(self._roster, name, ops.parse_new_salary(salary_text))
        if len(updated) == len(self._roster):
            return False
        self.on_workers_change(updated)
        return True

    def edit_salary(self, name: str, text: str) -> None:
        self._apply(name, lambda w: ops.edit_salary(w, text))

    def mark_present(self, name: str) -> None:
        self._apply(name, ops.mark_present)

    def mark_absent(self, name: str) -> None:
        self._apply(name, ops.mark_absent)

    def delete_worker(self, name: str) -> None:
        self.on_workers_change(ops.delete_worker(self._roster, name))

    def reset_attendance(self, *, confirmed: bool = False) -> bool:
        """Bulk reset; does nothing until the user has confirmed."""
        if not confirmed:
            return False
        self.on_reset_attendance()
        return True

    def report(self) -> ReportData:
        return self._reports.build_roster_report(self._roster)

    def _apply(self, name: str, patch: ops.WorkerPatch) -> None:
        self.on_workers_change(ops.update_worker(self._roster, name, patch))

    def _notify(self) -> None:
        if self._on_change:
            self._on_change(self._roster)
