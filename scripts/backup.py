"""Run one vacation backup (export + mail) outside the web process.

Note: with --output the workbook is only written to disk and no mail is sent.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from vacation_tracker.backup.exporter import build_workbook
from vacation_tracker.common.datetime_utils import now_utc
from vacation_tracker.common.logging_utils import configure_logging
from vacation_tracker.container import build_container
from vacation_tracker.core.exceptions import DomainError
from vacation_tracker.main import load_settings

logger = logging.getLogger("vacation_tracker.scripts.backup")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--output", type=Path, help="write the .xlsx here instead of mailing it")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = load_settings()
    configure_logging(settings.get("LOG_LEVEL", "INFO"))
    container = build_container(settings)

    try:
        if args.output:
            content = build_workbook(
                container.employees_repo.list_all(),
                container.vacations_repo.list_all(),
                generated_at=now_utc(),
            )
            args.output.write_bytes(content)
            print(f"OK: Backup written to {args.output} ({round(len(content) / 1024)} KB)")
            return 0

        result = container.backup_service.perform_backup()
    except DomainError as e:
        logger.error("Backup failed: %s", e)
        return 1

    print(f"OK: Backup sent to {result.recipient} ({result.employee_count} employees, {result.vacation_count} vacations)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
