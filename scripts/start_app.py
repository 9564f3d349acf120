#!/usr/bin/env python3
"""Serve the Baz API with uvicorn.

logfire is configured before the application module is imported, so
failures while building the app are traced too.
"""

import sys

import logfire
import uvicorn

from baz.config import Settings
from baz.util.logging import setup_logging
from baz.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("startup", host=settings.host, port=settings.port):
        try:
            uvicorn.run(
                "baz.interface.api.app:app",
                host=settings.host,
                port=settings.port,
                log_level="debug" if settings.debug else "info",
            )
        except Exception as e:
            logfire.exception("Baz API failed to start", error_type=type(e).__name__)
            raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
