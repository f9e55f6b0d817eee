import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from confserver.core.config import Settings, get_settings
from confserver.core.cors import install_cors
from confserver.core.errors import install_error_handlers
from confserver.core.logging_setup import configure_logging
from confserver.core.static import SPAStaticFiles
from confserver.repositories.json_storage import JsonStorage
from confserver.routers import conference as conference_router
from confserver.routers import registrations as registrations_router
from confserver.services.conference_service import ConferenceService
from confserver.services.registration_service import RegistrationService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("CORS mode: %s", settings.cors_mode)
    logger.info("Data directory: %s", settings.data_dir)
    if not (settings.client_dist_dir / "index.html").exists():
        logger.warning("Client bundle not found at %s; unmatched routes will 404", settings.client_dist_dir)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application from explicit settings (defaults to the environment)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Conference Registration API", lifespan=lifespan)
    app.state.settings = settings

    storage = JsonStorage.from_settings(settings)
    app.state.conference_service = ConferenceService(storage)
    app.state.registration_service = RegistrationService(storage)

    install_error_handlers(app)
    install_cors(app, settings)

    app.include_router(conference_router.router)
    app.include_router(registrations_router.router)
    # must stay last: it answers every GET the routers above did not match
    app.mount(
        "/",
        SPAStaticFiles(directory=settings.client_dist_dir, check_dir=False),
        name="client",
    )
    return app


app = create_app()
