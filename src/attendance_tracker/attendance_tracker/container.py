from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .core.constants import DEFAULT_ROSTER, PREFS_NAMESPACE, WORKERS_KEY
from .database.connection import DatabaseConnection, DBConfig
from .payroll.service import PayrollReportService
from .persistence.write_queue import SaveQueue
from .preferences.sqlalchemy_store import SQLAlchemyPreferencesStore
from .workers.kv_worker_repository import KeyValueWorkerRepository
from .workers.service import ChangeListener, RosterService, build_default_roster


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    prefs_store: SQLAlchemyPreferencesStore
    workers_repo: KeyValueWorkerRepository
    save_queue: SaveQueue

    payroll_report_service: PayrollReportService
    roster_service: RosterService


def build_container(
    *,
    db_config: dict,
    namespace: str = PREFS_NAMESPACE,
    workers_key: str = WORKERS_KEY,
    default_roster: Iterable[tuple[str, int]] = DEFAULT_ROSTER,
    on_change: Optional[ChangeListener] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig(path=str(db_config["path"])))

    prefs_store = SQLAlchemyPreferencesStore(conn, namespace=namespace)
    workers_repo = KeyValueWorkerRepository(prefs_store, key=workers_key)
    save_queue = SaveQueue(workers_repo)

    payroll_report_service = PayrollReportService()
    roster_service = RosterService(
        workers_repo,
        save_queue,
        default_roster=build_default_roster(default_roster),
        report_service=payroll_report_service,
        on_change=on_change,
    )

    return Container(
        conn=conn,
        prefs_store=prefs_store,
        workers_repo=workers_repo,
        save_queue=save_queue,
        payroll_report_service=payroll_report_service,
        roster_service=roster_service,
    )
