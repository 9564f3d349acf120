#!/usr/bin/env python3
"""Apply Alembic migrations to the configured database.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c2a9d   # upgrade to a specific revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from baz.config import Settings
from baz.util.logging import setup_logging
from baz.util.observability import configure_logfire


def migrate(settings: Settings, target: str = "head") -> None:
    config = Config("alembic.ini")
    config.set_main_option("sqlalchemy.url", settings.database_url)

    command.upgrade(config, target)


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    with logfire.span("migrate", target=target, environment=settings.environment):
        try:
            migrate(settings, target)
        except Exception:
            # Fail the deploy rather than start on a half-migrated schema
            logfire.exception("Migration to {target} failed", target=target)
            raise
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
