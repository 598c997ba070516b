import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "crew_payroll_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

DEFAULT_BASE_HOURS = 10
DEFAULT_BREAK_MINUTES = 60
OT_RATE_BASIS = "fixed"

SHEET_API_URL = ""
SHEET_TIMEOUT = 5
