import logging

from launcher.config.settings import Settings, get_settings
from launcher.utils.decorators import async_log_execution_time
from queue_workers.context import ApplicationContext
from queue_workers.resolver import resolve_queue

logger = logging.getLogger(__name__)


@async_log_execution_time
async def start_worker(settings: Settings | None = None) -> None:
    """Start the worker for the queue named by the `QUEUE` setting."""
    settings = settings or get_settings()
    resolved = resolve_queue(settings.queue)

    await ApplicationContext.create(resolved.worker_root)

    logger.info(f'QUEUE "{resolved.queue_name}" STARTED')
