import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_db"),
}

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data and the demo login on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

EMPLOYEE_PAGE_SIZE = int(os.getenv("EMPLOYEE_PAGE_SIZE", "20"))
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
