"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_ALLOWANCE_DAYS = 1
MAX_ALLOWANCE_DAYS = 50
DEFAULT_EMPLOYEE_COLOR = "#1c5975"

DEFAULT_BACKUP_INTERVAL_DAYS = 7
DEFAULT_SMTP_TIMEOUT_SECONDS = 30

BACKUP_FILE_PREFIX = "vacation-backup"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

ADMIN_USER_ID = "admin"

# Next-run times are shown to users in this zone
DISPLAY_TIMEZONE = "Europe/Berlin"

# Column sizes in database/schema.sql
MAX_ID_LENGTH = 64
MAX_NAME_LENGTH = 200
MAX_COLOR_LENGTH = 16

MAX_NOTE_LENGTH = 2000

MAX_VACATION_SPAN_DAYS = 3 * 366

# Write requests per client within one window
RATE_LIMIT_MAX = 100
RATE_LIMIT_WINDOW_SECONDS = 15 * 60
