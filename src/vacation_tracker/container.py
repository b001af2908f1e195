from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from .auth.service import AuthService
from .backup.mailer import MailTransport, SMTPMailTransport
from .backup.schedule import BackupScheduler
from .backup.service import BackupService
from .common.datetime_utils import now_utc
from .core.constants import DEFAULT_BACKUP_INTERVAL_DAYS
from .core.enums import StorageBackend
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .database.seed import ensure_demo_employees
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .reconciliation.service import ReconciliationService
from .vacations.memory_vacation_repository import InMemoryVacationRepository
from .vacations.mysql_vacation_repository import MySQLVacationRepository
from .vacations.repository import VacationRepository
from .vacations.service import VacationService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    storage_backend: StorageBackend
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    vacations_repo: VacationRepository
    mailer: MailTransport

    auth_service: AuthService
    employee_service: EmployeeService
    vacation_service: VacationService
    reconciliation_service: ReconciliationService
    backup_service: BackupService
    backup_scheduler: BackupScheduler

    @property
    def mailer_configured(self) -> bool:
        return bool(getattr(self.mailer, "configured", True))


def build_container(
    settings: dict,
    *,
    employees_repo: Optional[EmployeeRepository] = None,
    vacations_repo: Optional[VacationRepository] = None,
    mailer: Optional[MailTransport] = None,
    clock: Callable[[], datetime] = now_utc,
) -> Container:
    """Wire stores and services once per process.

    `settings` uses the keys of the vacation_tracker.config modules. Stores and
    the mailer can be injected (tests); otherwise they follow STORAGE_BACKEND
    and SMTP_CONFIG.
    """

    backend = StorageBackend(str(settings.get("STORAGE_BACKEND", StorageBackend.MEMORY.value)).lower())
    conn: Optional[DatabaseConnection] = None

    if backend is StorageBackend.MYSQL and (employees_repo is None or vacations_repo is None):
        db_config = settings["DB_CONFIG"]
        if settings.get("AUTO_INIT_DB"):
            apply_schema(db_config)
        conn = DatabaseConnection(DBConfig.from_dict(db_config))
        employees_repo = employees_repo or MySQLEmployeeRepository(conn)
        vacations_repo = vacations_repo or MySQLVacationRepository(conn)
    else:
        employees_repo = employees_repo if employees_repo is not None else InMemoryEmployeeRepository()
        vacations_repo = vacations_repo if vacations_repo is not None else InMemoryVacationRepository()

    if settings.get("SEED_DEMO_DATA"):
        ensure_demo_employees(employees_repo)

    if mailer is None:
        mailer = SMTPMailTransport.from_config(settings.get("SMTP_CONFIG") or {}, sender=settings.get("EMAIL_FROM", ""))

    interval = timedelta(days=int(settings.get("BACKUP_INTERVAL_DAYS", DEFAULT_BACKUP_INTERVAL_DAYS)))

    auth_service = AuthService(str(settings.get("ADMIN_PIN") or ""), clock=clock)
    employee_service = EmployeeService(employees_repo)
    vacation_service = VacationService(vacations_repo, employees_repo, clock=clock)
    reconciliation_service = ReconciliationService(employees_repo, vacations_repo, clock=clock)
    backup_service = BackupService(
        employees_repo,
        vacations_repo,
        mailer,
        recipient=str(settings.get("BACKUP_RECIPIENT") or ""),
        interval=interval,
        clock=clock,
    )
    backup_scheduler = BackupScheduler(backup_service, clock=clock)

    logger.debug("Container ready (storage=%s, backup every %s)", backend.value, interval)
    return Container(
        storage_backend=backend,
        conn=conn,
        employees_repo=employees_repo,
        vacations_repo=vacations_repo,
        mailer=mailer,
        auth_service=auth_service,
        employee_service=employee_service,
        vacation_service=vacation_service,
        reconciliation_service=reconciliation_service,
        backup_service=backup_service,
        backup_scheduler=backup_scheduler,
    )
