#!/usr/bin/env python3
"""Serve the wishes API with uvicorn.

Logging and Logfire are configured before the app module is imported so
that import-time failures are reported too.
"""

import sys

import logfire
import uvicorn

from wishes.config import Settings
from wishes.util.logging import setup_logging
from wishes.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("serve", host=settings.host, port=settings.port):
        try:
            uvicorn.run(
                "wishes.interface.api.app:app",
                host=settings.host,
                port=settings.port,
                log_level="debug" if settings.debug else "info",
            )
        except Exception:
            logfire.exception("Wishes API failed to start")
            raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
