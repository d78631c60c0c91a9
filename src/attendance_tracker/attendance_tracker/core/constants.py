"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DAYS_PER_MONTH = 30

PREFS_NAMESPACE = "worker_prefs"
WORKERS_KEY = "workers_json"

DEFAULT_ROSTER = (
    ("Ravi", 500),
    ("Sita", 400),
    ("Lakshmi", 450),
)

RESET_CONFIRM_MESSAGE = "Are you sure you want to reset all attendance? This action cannot be undone."

# Stored counters must stay readable as 32-bit signed integers.
MAX_STORED_INT = 2**31 - 1
