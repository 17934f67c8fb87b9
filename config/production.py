import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timeclock_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

ENGINE = {
    "MAX_ENTRIES_PER_DAY": int(os.getenv("MAX_ENTRIES_PER_DAY", "10")),
    "BREAK_LENIENCY_MINUTES": int(os.getenv("BREAK_LENIENCY_MINUTES", "10")),
    "FUTURE_TOLERANCE_MINUTES": int(os.getenv("FUTURE_TOLERANCE_MINUTES", "5")),
    "BACKFILL_DAYS": int(os.getenv("BACKFILL_DAYS", "7")),
    "STALE_ENTRY_DAYS": int(os.getenv("STALE_ENTRY_DAYS", "30")),
    "LOCATION_REQUIRED": bool(int(os.getenv("LOCATION_REQUIRED", "0"))),
    "WEEK_START": int(os.getenv("WEEK_START", "0")),
    "MONTH_START_DAY": int(os.getenv("MONTH_START_DAY", "1")),
}
