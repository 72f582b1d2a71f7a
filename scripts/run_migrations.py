#!/usr/bin/env python3
"""Apply the onboarding schema migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from onboard.config import Settings
from onboard.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"

    try:
        logfire.info(
            "Applying migrations", environment=settings.environment, target=target
        )

        alembic_cfg = Config("alembic.ini")
        alembic_cfg.set_main_option(
            "sqlalchemy.url", settings.database_url.replace("%", "%%")
        )
        command.upgrade(alembic_cfg, target)

        logfire.info("Migrations applied", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            target=target,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container doesn't start with a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
