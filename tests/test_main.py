from __future__ import annotations

import pytest

from attendance_tracker.database.bootstrap import list_tables
from attendance_tracker.main import create_app
from attendance_tracker.workers.model import Worker
from config import get_settings_module


def test_settings_module_selection():
    assert get_settings_module() == "config.development"
    assert get_settings_module("Testing") == "config.testing"
    assert get_settings_module("prod") == "config.production"
    assert get_settings_module("staging") == "config.development"


@pytest.mark.asyncio
async def test_create_app_seeds_fresh_store():
    container = await create_app("testing")
    await container.roster_service.flush()

    assert list_tables(container.conn) == ["preferences"]
    assert container.workers_repo.load() == (
        Worker("Ravi", 500, 0),
        Worker("Sita", 400, 0),
        Worker("Lakshmi", 450, 0),
    )
    await container.roster_service.close()


@pytest.mark.asyncio
async def test_create_app_reports_changes():
    seen = []
    container = await create_app("testing", on_change=seen.append)

    container.roster_service.mark_present("Sita")
    await container.roster_service.close()

    assert seen[-1][1] == Worker("Sita", 400, 1)


def test_settings_share_the_package_defaults():
    from attendance_tracker.core.constants import DEFAULT_ROSTER
    from config import testing
    from config.config import Config

    assert Config.DEFAULT_ROSTER is DEFAULT_ROSTER
    assert testing.DEFAULT_ROSTER is DEFAULT_ROSTER
