"""FastAPI application factory."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI

from baz import __version__
from baz.interface.api.routes import baz as baz_routes
from baz.interface.api.routes import health as health_routes
from baz.util.di.container import create_container, setup_di
from baz.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the Baz API.

    logfire must be configured before this runs: scripts/start_app.py does
    it for the server and tests/conftest.py for the test suite.

    Args:
        container: DI container to resolve handlers from. Defaults to the
            production container. Closed when the application shuts down.

    Returns:
        Configured application
    """
    container = container or create_container()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        yield
        await container.close()

    app_instance = FastAPI(
        title="Baz API",
        description="Create, read, update and delete Baz records",
        version=__version__,
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)
    setup_di(app_instance, container)

    for router in (health_routes.router, baz_routes.router):
        app_instance.include_router(router)

    return app_instance


# Module-level instance for uvicorn
app = create_app()
