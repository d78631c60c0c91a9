"""Serialized, fire-and-forget roster saves.

Each mutation hands over a full snapshot of the roster. Snapshots are written
one at a time in the order they were submitted, so once the queue is idle the
stored roster equals the last snapshot submitted.
"""
from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Optional, Sequence

from ..workers.model import Roster, Worker
from ..workers.repository import WorkerRepository

logger = logging.getLogger(__name__)


class SaveQueue:
    def __init__(self, repository: WorkerRepository):
        self._repository = repository
        self._queue: Optional[asyncio.Queue[Roster]] = None
        self._consumer: Optional[asyncio.Task] = None
        self.failed_writes = 0

    def submit(self, roster: Sequence[Worker]) -> None:
        """Enqueue a snapshot; must be called from code running on the event loop."""
        self._ensure_consumer().put_nowait(tuple(roster))

    def _ensure_consumer(self) -> asyncio.Queue[Roster]:
        if self._queue is not None and self._consumer is not None and not self._consumer.done():
            return self._queue
        loop = asyncio.get_running_loop()
        if self._queue is None:
            self._queue = asyncio.Queue()
        self._consumer = loop.create_task(self._run(self._queue), name="roster-save-queue")
        return self._queue

    async def _run(self, queue: asyncio.Queue[Roster]) -> None:
        while True:
            snapshot = await queue.get()
            try:
                await asyncio.to_thread(self._repository.save, snapshot)
            except Exception:
                # Best effort: the next mutation sends the whole roster again.
                self.failed_writes += 1
                logger.warning("saving roster of %d workers failed", len(snapshot), exc_info=True)
            finally:
                queue.task_done()

    async def join(self) -> None:
        """Wait until every submitted snapshot has been written (or has failed)."""
        if self._queue is not None:
            await self._queue.join()

    async def aclose(self) -> None:
        await self.join()
        if self._consumer is not None:
            self._consumer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._consumer
        self._consumer = None
        self._queue = None
