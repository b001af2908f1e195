SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "memory"
DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "vacation_db_test",
}

AUTO_INIT_DB = False
SEED_DEMO_DATA = False

ADMIN_PIN = "0000"
AUTH_REQUIRED = False

BACKUP_RECIPIENT = "backup@example.com"
EMAIL_FROM = "noreply@example.com"
BACKUP_INTERVAL_DAYS = 7
BACKUP_SCHEDULER_ENABLED = False
SMTP_CONFIG = {
    "host": "localhost",
    "port": 25,
    "user": "",
    "password": "",
    "use_tls": False,
    "timeout": 5.0,
}

RATE_LIMIT_ENABLED = True
RATE_LIMIT_MAX = 1000
RATE_LIMIT_WINDOW_SECONDS = 900
