import logging

import uvicorn

from files_api.main import create_app
from launcher.config.settings import ApiSettings, get_api_settings

logger = logging.getLogger(__name__)


async def start_api(settings: ApiSettings | None = None) -> None:
    """Serve the files API until the server shuts down."""
    settings = settings or get_api_settings()
    app = create_app(settings)

    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)

    # uvicorn exits the process when the port cannot be bound
    sock = config.bind_socket()
    logger.info(f"API is running on: http://localhost:{settings.port}")
    await server.serve(sockets=[sock])
