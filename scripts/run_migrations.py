#!/usr/bin/env python3
"""Apply pending alembic migrations (``alembic upgrade head``).

Run from the repository root so ``alembic.ini`` is found. A failure exits
non-zero so a deploy never starts the API against a stale schema.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from wishes.config import Settings
from wishes.util.observability import configure_logfire


def main() -> int:
    configure_logfire(Settings())

    with logfire.span("run_migrations"):
        try:
            command.upgrade(Config("alembic.ini"), "head")
        except Exception:
            logfire.exception("Database migration failed")
            raise
    logfire.info("Database schema is up to date")
    return 0


if __name__ == "__main__":
    sys.exit(main())
