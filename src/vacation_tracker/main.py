from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from .common.http_security import RateLimiter, register_security
from .common.logging_utils import configure_logging
from .config import get_settings_module
from .container import Container, build_container
from .core.constants import RATE_LIMIT_MAX, RATE_LIMIT_WINDOW_SECONDS
from .auth.controller import register as register_auth
from .backup.controller import register as register_backup
from .employees.controller import register as register_employees
from .health.controller import register as register_health
from .holidays.controller import register as register_holidays
from .reconciliation.controller import register as register_reconciliation
from .vacations.controller import register as register_vacations

logger = logging.getLogger(__name__)


def load_settings(overrides: Optional[dict] = None) -> dict:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {k: getattr(module, k) for k in dir(module) if k.isupper()}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def create_app(overrides: Optional[dict] = None, **container_kwargs: Any) -> Flask:
    """Application factory.

    `overrides` replaces settings values; `container_kwargs` are passed to
    build_container (tests inject stores, mailer and clock this way).
    """

    load_dotenv(override=False)
    settings = load_settings(overrides)

    app = Flask(__name__)
    app.config.update(settings)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))

    configure_logging("DEBUG" if app.config["DEBUG"] else settings.get("LOG_LEVEL", "INFO"))
    logger.info("Starting vacation tracker (settings=%s, storage=%s)", settings["SETTINGS_MODULE"], settings.get("STORAGE_BACKEND"))

    container: Container = build_container(settings, **container_kwargs)
    if settings.get("AUTH_REQUIRED") and not container.auth_service.enabled:
        logger.warning("AUTH_REQUIRED is on but ADMIN_PIN is empty; write routes will always answer 401")
    app.extensions["vacation_tracker"] = container

    limiter = None
    if settings.get("RATE_LIMIT_ENABLED", True):
        limiter = RateLimiter(
            int(settings.get("RATE_LIMIT_MAX", RATE_LIMIT_MAX)),
            float(settings.get("RATE_LIMIT_WINDOW_SECONDS", RATE_LIMIT_WINDOW_SECONDS)),
        )
    register_security(app, limiter)

    register_auth(app, container)
    register_employees(app, container)
    register_vacations(app, container)
    register_reconciliation(app, container)
    register_holidays(app, container)
    register_backup(app, container)
    register_health(app, container)

    if settings.get("BACKUP_SCHEDULER_ENABLED"):
        container.backup_scheduler.start()

    return app


def get_container(app: Flask) -> Container:
    return app.extensions["vacation_tracker"]
