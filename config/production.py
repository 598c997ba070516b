import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "crew_payroll"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

DEFAULT_BASE_HOURS = float(os.getenv("DEFAULT_BASE_HOURS", "10"))
DEFAULT_BREAK_MINUTES = int(os.getenv("DEFAULT_BREAK_MINUTES", "60"))
OT_RATE_BASIS = os.getenv("OT_RATE_BASIS", "fixed")

SHEET_API_URL = os.getenv("SHEET_API_URL", "")
SHEET_TIMEOUT = float(os.getenv("SHEET_TIMEOUT", "15"))
