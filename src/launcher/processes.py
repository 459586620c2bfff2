import logging
from enum import Enum
from typing import Awaitable, Callable, Dict, Sequence

from launcher.errors import InvalidRoleError

logger = logging.getLogger(__name__)

StartRoutine = Callable[[], Awaitable[None]]


class ProcessRole(str, Enum):
    API = "api"
    WORKER = "worker"


async def _start_api() -> None:
    from launcher.bootstrap.api import start_api
    await start_api()


async def _start_worker() -> None:
    from launcher.bootstrap.worker import start_worker
    await start_worker()


PROCESS_ROLES: Dict[ProcessRole, StartRoutine] = {
    ProcessRole.API: _start_api,
    ProcessRole.WORKER: _start_worker,
}


def select_process(role: str | None) -> StartRoutine:
    """Look up the start routine for `role`.

    Raises:
        InvalidRoleError: `role` is missing or not a known process role
    """
    valid_roles = [r.value for r in PROCESS_ROLES]
    if not role or role not in valid_roles:
        raise InvalidRoleError(role, valid_roles)
    return PROCESS_ROLES[ProcessRole(role)]


async def start_process(role: str | None) -> None:
    start = select_process(role)
    logger.info("Starting %s process", role)
    await start()


async def run(argv: Sequence[str]) -> None:
    """Start the process named by the first argument after the program name."""
    await start_process(argv[1] if len(argv) > 1 else None)
