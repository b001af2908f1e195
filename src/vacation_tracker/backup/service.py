from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import now_utc
from ..core.constants import BACKUP_FILE_PREFIX, DEFAULT_BACKUP_INTERVAL_DAYS, XLSX_MIMETYPE
from ..core.exceptions import DataAccessError, DeliveryError
from ..employees.repository import EmployeeRepository
from ..vacations.repository import VacationRepository
from .exporter import build_workbook
from .mailer import MailTransport
from .model import Attachment, BackupResult, OutgoingMail
from .schedule import next_backup_time

logger = logging.getLogger(__name__)


class BackupService:
    """Export employees and vacations and mail them to a fixed recipient.

    One instance per process, created by the container and shared by the
    HTTP layer and the scheduler, so last-run state is never duplicated.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        vacations: VacationRepository,
        mailer: MailTransport,
        *,
        recipient: str,
        interval: timedelta = timedelta(days=DEFAULT_BACKUP_INTERVAL_DAYS),
        clock: Callable[[], datetime] = now_utc,
    ):
        self._employees = employees
        self._vacations = vacations
        self._mailer = mailer
        self._recipient = recipient
        self._interval = interval
        self._clock = clock
        self._started_at = clock()
        self._last_backup_at: Optional[datetime] = None
        self._lock = threading.Lock()

    @property
    def recipient(self) -> str:
        return self._recipient

    @property
    def interval(self) -> timedelta:
        return self._interval

    @property
    def last_backup_at(self) -> Optional[datetime]:
        with self._lock:
            return self._last_backup_at

    def get_next_backup_time(self) -> datetime:
        anchor = self.last_backup_at or self._started_at
        return next_backup_time(anchor, self._interval)

    def perform_backup(self) -> BackupResult:
        logger.info("Starting backup process...")
        try:
            employees = list(self._employees.list_all())
            vacations = list(self._vacations.list_all())
        except DataAccessError:
            logger.error("Backup aborted: could not read stores")
            raise
        except Exception as e:
            logger.error("Backup aborted: could not read stores")
            raise DataAccessError(f"Could not read backup data: {e}") from e
        logger.info("Collected data: %d employees, %d vacations", len(employees), len(vacations))

        if not self._recipient:
            raise DeliveryError("No backup recipient configured")

        generated_at = self._clock()
        try:
            content = build_workbook(employees, vacations, generated_at=generated_at)
        except Exception as e:
            logger.exception("Backup aborted: could not build workbook")
            raise DeliveryError(f"Could not build backup workbook: {e}") from e
        day = generated_at.strftime("%Y-%m-%d")
        result_size = len(content)
        mail = OutgoingMail(
            recipient=self._recipient,
            subject=f"Vacation Data Backup - {day}",
            body=(
                "Automatic vacation data backup.\n\n"
                f"Generated at: {generated_at.isoformat()}\n"
                f"Employees: {len(employees)}\n"
                f"Vacation records: {len(vacations)}\n"
                f"Attachment size: {round(result_size / 1024)} KB\n"
            ),
            attachments=(Attachment(filename=f"{BACKUP_FILE_PREFIX}-{day}.xlsx", content=content, mimetype=XLSX_MIMETYPE),),
        )

        try:
            self._mailer.send(mail)
        except DeliveryError:
            logger.error("Backup delivery to %s failed", self._recipient)
            raise
        except Exception as e:
            logger.error("Backup delivery to %s failed", self._recipient)
            raise DeliveryError(f"Mail transport error: {e}") from e

        completed_at = self._clock()
        with self._lock:
            self._last_backup_at = completed_at

        result = BackupResult(
            recipient=self._recipient,
            employee_count=len(employees),
            vacation_count=len(vacations),
            size_bytes=result_size,
            completed_at=completed_at,
        )
        logger.info("Backup completed successfully (%s sent to %s)", result.size_label, result.recipient)
        return result
