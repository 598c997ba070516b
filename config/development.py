import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "crew_payroll"),
}

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

DEFAULT_BASE_HOURS = float(os.getenv("DEFAULT_BASE_HOURS", "10"))
DEFAULT_BREAK_MINUTES = int(os.getenv("DEFAULT_BREAK_MINUTES", "60"))
# "fixed": OT hourly rate = daily rate / 10; "base_hours": daily rate / worker base hours
OT_RATE_BASIS = os.getenv("OT_RATE_BASIS", "fixed")

# Empty URL disables spreadsheet sync.
SHEET_API_URL = os.getenv("SHEET_API_URL", "")
SHEET_TIMEOUT = float(os.getenv("SHEET_TIMEOUT", "15"))
