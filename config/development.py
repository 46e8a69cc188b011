import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "absenta_db"),
}

# Export artifacts are written here and served under REPORTS_URL_PREFIX
REPORTS_DIR = os.getenv("REPORTS_DIR", os.path.join(os.getcwd(), "tmp", "reports"))
REPORTS_URL_PREFIX = os.getenv("REPORTS_URL_PREFIX", "/reports")

CLIENT_URL = os.getenv("CLIENT_URL", "http://localhost:3000")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
