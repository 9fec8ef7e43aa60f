#!/usr/bin/env python3
"""Apply alembic migrations to the configured database.

Usage:
    python scripts/run_migrations.py                     # upgrade to head
    python scripts/run_migrations.py upgrade <revision>
    python scripts/run_migrations.py downgrade <revision>
"""

import sys

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from connector.config import Settings
from connector.util.logging import setup_logging
from connector.util.observability import configure_logfire

DIRECTIONS = {"upgrade": command.upgrade, "downgrade": command.downgrade}


def migrate(settings: Settings, direction: str = "upgrade", revision: str = "head"):
    """Move the schema to ``revision``.

    Only host and database name are logged; the URL carries credentials.
    """
    url = make_url(settings.database_url)
    with logfire.span(
        "run_migrations",
        direction=direction,
        revision=revision,
        host=url.host,
        database=url.database,
    ):
        DIRECTIONS[direction](Config("alembic.ini"), revision)


def main(argv: list[str]) -> int:
    direction, revision = (argv[1], argv[2]) if len(argv) > 2 else ("upgrade", "head")
    if direction not in DIRECTIONS:
        print(__doc__, file=sys.stderr)
        return 2

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        migrate(settings, direction, revision)
    except Exception as e:
        logfire.error(
            "Database migration failed",
            direction=direction,
            revision=revision,
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Never start the app on a half-migrated schema
        raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
