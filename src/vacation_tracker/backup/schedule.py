from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Callable, Optional

from ..common.datetime_utils import now_utc
from ..core.exceptions import DomainError

if TYPE_CHECKING:
    from .service import BackupService

logger = logging.getLogger(__name__)


def next_backup_time(anchor: datetime, interval: timedelta) -> datetime:
    """Next run = anchor + interval; anchor is the last success or the service start."""
    return anchor + interval


class BackupScheduler:
    """Background thread that fires BackupService.perform_backup when due.

    A failed run is not retried; the next attempt waits a full interval.
    """

    def __init__(
        self,
        service: "BackupService",
        *,
        clock: Callable[[], datetime] = now_utc,
        max_sleep_seconds: float = 60.0,
    ):
        self._service = service
        self._clock = clock
        self._max_sleep = max_sleep_seconds
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._skip_until: Optional[datetime] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def due_at(self) -> datetime:
        due = self._service.get_next_backup_time()
        if self._skip_until and self._skip_until > due:
            return self._skip_until
        return due

    def run_pending(self) -> bool:
        """Run one backup if it is due. Returns True when a run was attempted."""
        now = self._clock()
        if now < self.due_at():
            return False

        try:
            result = self._service.perform_backup()
            self._skip_until = None
            logger.info("Scheduled backup sent to %s", result.recipient)
        except DomainError as e:
            self._skip_until = now + self._service.interval
            logger.error("Scheduled backup failed, next attempt at %s: %s", self._skip_until.isoformat(), e)
        except Exception:
            self._skip_until = now + self._service.interval
            logger.exception("Scheduled backup crashed, next attempt at %s", self._skip_until.isoformat())
        return True

    def _loop(self) -> None:
        while not self._stop.is_set():
            if self.run_pending():
                continue
            wait = (self.due_at() - self._clock()).total_seconds()
            self._stop.wait(max(1.0, min(wait, self._max_sleep)))

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="backup-scheduler", daemon=True)
        self._thread.start()
        logger.info(
            "Automatic backup started - every %s, next at %s",
            self._service.interval, self.due_at().isoformat(),
        )

    def stop(self, timeout: float = 5.0) -> None:
        self._stop.set()
        if self._thread:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Automatic backup stopped")
