#!/usr/bin/env python3
"""Apply the beta table migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from betagate.config import Settings
from betagate.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to a revision."""
    settings = Settings()
    configure_logfire(settings)

    # Migrations create the default table shape only
    if settings.beta.table_name != "beta" or settings.beta.additional_fields:
        logfire.warn(
            "Custom beta table settings are not migrated automatically",
            table_name=settings.beta.table_name,
            additional_fields=list(settings.beta.additional_fields),
        )

    try:
        with logfire.span("run_migrations", revision=revision):
            command.upgrade(Config("alembic.ini"), revision)
        logfire.info("Beta migrations applied", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Beta migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
