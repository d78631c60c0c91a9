from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Column, MetaData, String, Table, Text
from sqlalchemy.engine import Connection

from .connection import DatabaseConnection

metadata = MetaData()

preferences = Table(
    "preferences",
    metadata,
    Column("namespace", String(100), primary_key=True),
    Column("key", String(100), primary_key=True),
    Column("value", Text, nullable=False),
)


@contextmanager
def db_transaction(conn_factory: DatabaseConnection) -> Iterator[Connection]:
    """Yield a connection inside a transaction; commit on success, roll back on error."""
    with conn_factory.engine().begin() as conn:
        yield conn
