#!/usr/bin/env python3
"""Bring the database schema up to the newest Alembic revision.

Runs before the API starts; a failure stops the deploy.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from natter.config import Settings
from natter.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(revision: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
        except Exception:
            logfire.exception("Migration to {revision} failed", revision=revision)
            raise

    logfire.info("Schema is at {revision}", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
