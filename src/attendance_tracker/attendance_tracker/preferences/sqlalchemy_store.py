from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert

from ..core.constants import PREFS_NAMESPACE
from ..database.connection import DatabaseConnection
from ..database.kv_base import db_transaction, preferences
from .repository import KeyValueStore


class SQLAlchemyPreferencesStore(KeyValueStore):
    def __init__(self, conn_factory: DatabaseConnection, *, namespace: str = PREFS_NAMESPACE):
        self._conn_factory = conn_factory
        self._namespace = namespace

    def get(self, key: str) -> Optional[str]:
        stmt = select(preferences.c.value).where(
            preferences.c.namespace == self._namespace,
            preferences.c.key == key,
        )
        with db_transaction(self._conn_factory) as conn:
            return conn.execute(stmt).scalar_one_or_none()

    def put(self, key: str, value: str) -> None:
        stmt = insert(preferences).values(namespace=self._namespace, key=key, value=value)
        stmt = stmt.on_conflict_do_update(
            index_elements=[preferences.c.namespace, preferences.c.key],
            set_={"value": stmt.excluded.value},
        )
        with db_transaction(self._conn_factory) as conn:
            conn.execute(stmt)
