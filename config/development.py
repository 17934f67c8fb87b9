import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timeclock_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Engine limits; unset keys keep their defaults.
ENGINE = {
    "MAX_ENTRIES_PER_DAY": int(os.getenv("MAX_ENTRIES_PER_DAY", "10")),
    "BREAK_LENIENCY_MINUTES": int(os.getenv("BREAK_LENIENCY_MINUTES", "10")),
    "LOCATION_REQUIRED": bool(int(os.getenv("LOCATION_REQUIRED", "0"))),
    "WEEK_START": int(os.getenv("WEEK_START", "0")),
    "MONTH_START_DAY": int(os.getenv("MONTH_START_DAY", "1")),
}
