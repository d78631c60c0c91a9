from __future__ import annotations

import json
import logging
from typing import Any, Sequence

from ..common.validators import INT_PATTERN
from ..core.constants import MAX_STORED_INT, WORKERS_KEY
from ..core.exceptions import RosterDecodeError
from ..preferences.repository import KeyValueStore
from .model import Roster, Worker
from .repository import WorkerRepository

logger = logging.getLogger(__name__)


def roster_to_json(roster: Sequence[Worker]) -> str:
    return json.dumps(
        [
            {
                "name": w.name,
                "monthlySalary": int(w.monthly_salary),
                "daysPresent": int(w.days_present),
            }
            for w in roster
        ],
        ensure_ascii=False,
    )


def _int_field(item: dict, field: str) -> int:
    value: Any = item.get(field, 0)
    if value is None:
        return 0
    # bool is an int subclass; JSON true/false is not a count.
    if isinstance(value, bool):
        raise RosterDecodeError(f"{field} must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise RosterDecodeError(f"{field} must be a whole number, got {value!r}")
        value = int(value)
    elif isinstance(value, str):
        if not INT_PATTERN.fullmatch(value.strip()):
            raise RosterDecodeError(f"{field} must be an integer, got {value!r}")
        value = int(value.strip())
    elif not isinstance(value, int):
        raise RosterDecodeError(f"{field} must be an integer, got {value!r}")

    if value > MAX_STORED_INT:
        raise RosterDecodeError(f"{field} is out of range, got {value!r}")
    # Counters are never negative; clamp instead of dropping the whole roster.
    return max(value, 0)


def roster_from_json(text: str) -> Roster:
    """Decode the stored JSON array.

    Raises RosterDecodeError for anything that is not a list of worker
    objects. Missing numeric fields default to 0.
    """

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RosterDecodeError(f"invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise RosterDecodeError(f"expected a JSON array, got {type(data).__name__}")

    workers: list[Worker] = []
    for item in data:
        if not isinstance(item, dict):
            raise RosterDecodeError(f"expected a JSON object, got {item!r}")
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            raise RosterDecodeError(f"worker without a name: {item!r}")
        workers.append(
            Worker(
                name=name,
                monthly_salary=_int_field(item, "monthlySalary"),
                days_present=_int_field(item, "daysPresent"),
            )
        )
    return tuple(workers)


class KeyValueWorkerRepository(WorkerRepository):
    """Stores the roster as one JSON blob under a single key."""

    def __init__(self, store: KeyValueStore, *, key: str = WORKERS_KEY):
        self._store = store
        self._key = key

    def load(self) -> Roster:
        raw = self._store.get(self._key)
        if raw is None:
            return ()

        try:
            return roster_from_json(raw)
        except RosterDecodeError as exc:
            logger.warning("stored roster under %r is unreadable, treating as empty: %s", self._key, exc)
            return ()

    def save(self, roster: Sequence[Worker]) -> None:
        self._store.put(self._key, roster_to_json(roster))
