import logging

from fastapi import FastAPI
from fastapi.routing import APIRoute

from files_api.errors import handle_broad_exceptions
from files_api.routers.files import router as files_router
from files_api.services import FileService
from launcher.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create a FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        summary="Accept files for processing",
        version="v1",
        generate_unique_id_function=custom_generate_unique_id,
    )
    app.state.settings = settings
    app.state.file_service = FileService()

    app.include_router(files_router, tags=["files"])

    app.middleware("http")(handle_broad_exceptions)

    logger.debug("Created %s application", settings.app_name)
    return app


def custom_generate_unique_id(route: APIRoute):
    """
    Generate prettier `operationId`s in the OpenAPI schema.

    These become the function names in generated client SDKs.
    """
    return f"{route.tags[0]}-{route.name}"
