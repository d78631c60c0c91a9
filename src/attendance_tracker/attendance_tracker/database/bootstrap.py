from __future__ import annotations

import logging

from sqlalchemy import inspect

from .connection import DatabaseConnection
from .kv_base import metadata

logger = logging.getLogger(__name__)


def apply_schema(conn_factory: DatabaseConnection) -> None:
    """Create the key-value tables if they do not exist yet (idempotent)."""
    metadata.create_all(conn_factory.engine())
    logger.debug("schema ready at %s", conn_factory.config.path)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    return sorted(inspect(conn_factory.engine()).get_table_names())
