from typing import List, Mapping, NamedTuple, Optional, Type

from launcher.errors import QueueInvalidError, WorkerModuleNotFoundError
from queue_workers.modules import WORKER_MODULES, WorkerModule
from queue_workers.queues import QUEUES, Queue


class ResolvedQueue(NamedTuple):
    queue_name: str
    worker_root: Type[WorkerModule]


def resolve_queue(
    role_key: Optional[str],
    queues: Mapping[str, Queue] = QUEUES,
    worker_modules: Mapping[str, Type[WorkerModule]] = WORKER_MODULES,
) -> ResolvedQueue:
    """Map a queue role key to its queue name and worker module.

    Raises:
        QueueInvalidError: the key is empty or not a known queue
        WorkerModuleNotFoundError: the queue has no worker module
    """
    queue = queues.get(role_key) if role_key else None
    if queue is None:
        raise QueueInvalidError(role_key)

    worker_root = worker_modules.get(role_key)
    if worker_root is None:
        raise WorkerModuleNotFoundError(role_key)

    return ResolvedQueue(queue_name=queue.value, worker_root=worker_root)


def missing_worker_modules(
    queues: Mapping[str, Queue] = QUEUES,
    worker_modules: Mapping[str, Type[WorkerModule]] = WORKER_MODULES,
) -> List[str]:
    """Queue role keys that have no worker module."""
    return [key for key in queues if key not in worker_modules]
