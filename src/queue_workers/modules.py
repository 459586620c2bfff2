from abc import ABC, abstractmethod
from typing import Dict, List, Type

from files_api.services import FileService


class WorkerModule(ABC):
    """Composition root for a worker process.

    Subclasses wire their providers by hand; the application context keeps
    the instances and hands them out by type.
    """

    @abstractmethod
    def build_providers(self) -> List[object]:
        """Construct the provider instances this worker hosts."""
        pass


class FileUploadWorkerModule(WorkerModule):
    """Worker for the file upload queue.

    No consumer is attached yet, so the process only hosts the file service.
    """

    def build_providers(self) -> List[object]:
        return [FileService()]


WORKER_MODULES: Dict[str, Type[WorkerModule]] = {
    "FILE_UPLOAD": FileUploadWorkerModule,
}
