"""Logfire tracing for the Baz service.

``configure_logfire`` must run once per process before anything is
instrumented. Scripts in ``scripts/`` do this at startup; the test suite does
it in ``tests/conftest.py``.

Usage:
    import logfire

    with logfire.span("baz_service.create_baz"):
        ...
    logfire.info("Baz created", baz_id=baz.id)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from baz import __version__
from baz.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure the logfire SDK from settings.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    export = observability.export_enabled

    options = dict(
        service_name=observability.service_name,
        service_version=__version__,
        environment=settings.environment,
        send_to_logfire=export,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    if observability.logfire_token:
        options["token"] = observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=export,
        git_sha=settings.git_sha,
    )


def _request_attributes(request, attributes):
    """Attach method and path to every request span."""
    extra = {}
    if getattr(request, "method", None):
        extra["method"] = request.method
    if getattr(request, "url", None) is not None:
        extra["path"] = request.url.path
    return {**attributes, **extra}


def instrument_fastapi(app: FastAPI) -> None:
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements issued through the engine.

    Args:
        engine: Async engine; its sync core is what gets instrumented
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,
    )
