#!/usr/bin/env python3
"""Serve the natter API with uvicorn.

Logfire and stdlib logging are configured before the app module is
imported, so errors raised while building the container are captured.
"""

import sys

import logfire
import uvicorn

from natter.config import Settings
from natter.util.logging import setup_logging
from natter.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info("Serving natter API at {url}", url=settings.base_url)
    try:
        uvicorn.run(
            "natter.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=settings.environment != "development",
        )
    except Exception:
        logfire.exception("natter API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
