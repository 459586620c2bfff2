"""Startup errors raised while selecting and bootstrapping a process."""
from typing import Iterable, Optional


class LauncherError(Exception):
    """Base class for fatal launcher errors."""


class InvalidRoleError(LauncherError):
    """The process role argument is missing or unknown."""

    def __init__(self, role: Optional[str], valid_roles: Iterable[str]):
        self.role = role
        self.valid_roles = list(valid_roles)
        super().__init__(
            f"Invalid process type. Use one of: {', '.join(self.valid_roles)}"
        )


class QueueInvalidError(LauncherError):
    """The queue role key is missing or not part of the queue enumeration."""

    def __init__(self, queue_key: Optional[str]):
        self.queue_key = queue_key
        super().__init__(f"QUEUE INVALID OR NOT PROVIDED: {queue_key}")


class WorkerModuleNotFoundError(LauncherError):
    """The queue role key has no worker module to start."""

    def __init__(self, queue_key: str):
        self.queue_key = queue_key
        super().__init__(f"MODULE NOT FOUND FOR {queue_key} QUEUE")
