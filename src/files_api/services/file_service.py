import logging

from files_api.schemas import CreateFileResponse

logger = logging.getLogger(__name__)


class FileService:
    """Accepts file uploads on behalf of an owner.

    Nothing is stored and nothing is published yet; object storage and the
    upload queue are wired in here once they exist.
    """

    def create_and_enqueue(self, owner_id: str) -> CreateFileResponse:
        logger.debug("Accepted file for owner %s", owner_id)
        return CreateFileResponse(
            message=f"File created and enqueued for owner {owner_id}"
        )
