"""Recompute used/remaining vacation days for every employee."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from vacation_tracker.common.logging_utils import configure_logging
from vacation_tracker.container import build_container
from vacation_tracker.core.exceptions import DomainError
from vacation_tracker.main import load_settings

logger = logging.getLogger("vacation_tracker.scripts.reconcile")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--year", type=int, default=None, help="target year (default: current year)")
    parser.add_argument("--dry-run", action="store_true", help="print the figures without saving")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = load_settings()
    configure_logging(settings.get("LOG_LEVEL", "INFO"))
    container = build_container(settings)

    try:
        if args.dry_run:
            rows = [s.to_dict() for s in container.reconciliation_service.summarize(args.year)]
        else:
            rows = [e.to_dict() for e in container.reconciliation_service.reconcile(args.year)]
    except DomainError as e:
        logger.error("Reconciliation failed: %s", e)
        return 1

    for row in rows:
        print(f"{row['name']}: used={row['used']} remaining={row['remaining']} (allowance={row['allowance']})")
    print(f"OK: {len(rows)} employees {'checked' if args.dry_run else 'updated'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
