import os


def get_settings_module() -> str:
    # Environment name comes from APP_ENV, defaulting to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "vacation_tracker.config.production"

    if env in {"test", "testing"}:
        return "vacation_tracker.config.testing"

    return "vacation_tracker.config.development"
