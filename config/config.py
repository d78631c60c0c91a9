from pathlib import Path

from attendance_tracker.core.constants import DEFAULT_ROSTER, PREFS_NAMESPACE, WORKERS_KEY


class Config:
    # Local key-value store
    DB_PATH = str(Path.home() / ".attendance_tracker" / "worker_prefs.db")
    PREFS_NAMESPACE = PREFS_NAMESPACE
    WORKERS_KEY = WORKERS_KEY

    # Seeded on first run when nothing is stored yet
    DEFAULT_ROSTER = DEFAULT_ROSTER

    LOG_LEVEL = "INFO"
    AUTO_INIT_DB = True
