import os

from .config import db_config_from_env, env_flag, smtp_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "memory" keeps everything in-process; "mysql" uses DB_CONFIG
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")
DB_CONFIG = db_config_from_env(default_password="devpass")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
SEED_DEMO_DATA = env_flag("SEED_DEMO_DATA", "1")

ADMIN_PIN = os.getenv("ADMIN_PIN", "1234")
AUTH_REQUIRED = env_flag("AUTH_REQUIRED", "0")

BACKUP_RECIPIENT = os.getenv("EMAIL_TO", "backup@example.com")
EMAIL_FROM = os.getenv("EMAIL_FROM", "noreply@example.com")
BACKUP_INTERVAL_DAYS = int(os.getenv("BACKUP_INTERVAL_DAYS", "7"))
BACKUP_SCHEDULER_ENABLED = env_flag("BACKUP_SCHEDULER_ENABLED", "0")
SMTP_CONFIG = smtp_config_from_env()

# Write requests per client address within the window, answered with 429 beyond that
RATE_LIMIT_ENABLED = env_flag("RATE_LIMIT_ENABLED", "1")
RATE_LIMIT_MAX = int(os.getenv("RATE_LIMIT_MAX", "100"))
RATE_LIMIT_WINDOW_SECONDS = int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "900"))
