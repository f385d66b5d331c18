import logging

from fastapi import FastAPI

from .api import progress
from .config import settings
from .engine import ProgressService
from .knowledge import DEFAULT_CONFIG
from .repository import PostgresCaseRepository

logger = logging.getLogger(__name__)


def build_progress_service() -> ProgressService:
    return ProgressService(
        repository=PostgresCaseRepository(settings.database_url),
        config=DEFAULT_CONFIG,
    )


def create_app(progress_service: ProgressService | None = None) -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    service = progress_service or build_progress_service()
    # Raises ConfigurationError before the app accepts any request.
    service.config.validate()

    app = FastAPI(title=settings.app_name)
    app.state.progress_service = service
    app.include_router(progress.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    logger.info("%s ready", settings.app_name)
    return app
