from pathlib import Path

from .config import Config

DB_CONFIG = {
    "path": str(Path.cwd() / "instance" / "worker_prefs.db"),
}

PREFS_NAMESPACE = Config.PREFS_NAMESPACE
WORKERS_KEY = Config.WORKERS_KEY
DEFAULT_ROSTER = Config.DEFAULT_ROSTER

DEBUG = True
LOG_LEVEL = "DEBUG"

# Create the preferences table on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = Config.AUTO_INIT_DB
