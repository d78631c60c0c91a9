from __future__ import annotations

import pytest

from attendance_tracker.database.connection import DatabaseConnection
from attendance_tracker.workers.model import Worker


@pytest.fixture(autouse=True)
def reset_connections():
    yield
    for conn in DatabaseConnection._instances.values():
        conn.dispose()
    DatabaseConnection._instances.clear()


@pytest.fixture
def three_workers():
    return (
        Worker("Ravi", 500, 3),
        Worker("Sita", 400, 5),
        Worker("Lakshmi", 450, 2),
    )
