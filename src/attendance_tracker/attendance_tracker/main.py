from __future__ import annotations

import importlib
import logging
from typing import Optional

from config import get_settings_module

from .common.logging_utils import configure_logging
from .container import Container, build_container
from .core.constants import DEFAULT_ROSTER, PREFS_NAMESPACE, WORKERS_KEY
from .database.bootstrap import apply_schema, list_tables
from .workers.service import ChangeListener

logger = logging.getLogger(__name__)


async def create_app(env: str = "development", *, on_change: Optional[ChangeListener] = None) -> Container:
    """Wire settings, storage and the roster controller, then load the roster.

    The returned container's ``roster_service`` is started: its ``workers`` hold
    the stored roster, or the seeded defaults on first run.
    """

    settings_module = get_settings_module(env)
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    db_config = getattr(settings, "DB_CONFIG")
    container = build_container(
        db_config=db_config,
        namespace=getattr(settings, "PREFS_NAMESPACE", PREFS_NAMESPACE),
        workers_key=getattr(settings, "WORKERS_KEY", WORKERS_KEY),
        default_roster=getattr(settings, "DEFAULT_ROSTER", DEFAULT_ROSTER),
        on_change=on_change,
    )

    if bool(getattr(settings, "AUTO_INIT_DB", True)):
        apply_schema(container.conn)
        if getattr(settings, "DEBUG", False):
            logger.debug("settings=%s db=%s tables=%s", settings_module, db_config["path"], list_tables(container.conn))

    await container.roster_service.start()
    return container
