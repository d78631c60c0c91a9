from .config import Config

DB_CONFIG = {
    "path": ":memory:",
}

PREFS_NAMESPACE = Config.PREFS_NAMESPACE
WORKERS_KEY = Config.WORKERS_KEY
DEFAULT_ROSTER = Config.DEFAULT_ROSTER

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
