import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "absenta_db"),
}

REPORTS_DIR = os.getenv("REPORTS_DIR", "/var/lib/absenta/reports")
REPORTS_URL_PREFIX = os.getenv("REPORTS_URL_PREFIX", "/reports")

CLIENT_URL = os.getenv("CLIENT_URL", "http://localhost:3000")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
