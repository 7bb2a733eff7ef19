#!/usr/bin/env python3
"""Apply Alembic migrations for the event log and suspension tables."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from agency.config import Settings
from agency.util.logging import setup_logging
from agency.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to a revision, logging failures to Logfire.

    Args:
        revision: Target Alembic revision
    """
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            alembic_cfg = Config("alembic.ini")
            command.upgrade(alembic_cfg, revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container fails and doesn't start with broken schema
            raise

        logfire.info("Database migrations completed", revision=revision)
        return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
