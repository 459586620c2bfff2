import logging
from typing import Dict, Type, TypeVar

from queue_workers.modules import WorkerModule

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApplicationContext:
    """Headless host for a worker module's providers. Opens no listener."""

    def __init__(self, module: WorkerModule):
        self.module = module
        self._providers: Dict[type, object] = {}

    @classmethod
    async def create(cls, module_cls: Type[WorkerModule]) -> "ApplicationContext":
        context = cls(module_cls())
        await context.init()
        return context

    async def init(self) -> None:
        for provider in self.module.build_providers():
            self._providers[type(provider)] = provider
        logger.info(
            "Initialized %s with providers: %s",
            type(self.module).__name__,
            ", ".join(cls.__name__ for cls in self._providers) or "none",
        )

    def get(self, provider_cls: Type[T]) -> T:
        """Return the provider instance registered for `provider_cls`."""
        try:
            return self._providers[provider_cls]
        except KeyError:
            raise LookupError(
                f"{provider_cls.__name__} is not provided by {type(self.module).__name__}"
            ) from None
