from .config import Config

DB_CONFIG = {
    "path": Config.DB_PATH,
}

PREFS_NAMESPACE = Config.PREFS_NAMESPACE
WORKERS_KEY = Config.WORKERS_KEY
DEFAULT_ROSTER = Config.DEFAULT_ROSTER

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = Config.AUTO_INIT_DB
