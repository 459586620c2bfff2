from fastapi import (
    APIRouter,
    Depends,
    status
)

from files_api.dependencies import get_caller_id, get_file_service
from files_api.schemas import CreateFileResponse
from files_api.services import FileService

router = APIRouter()


@router.post(
    "/files",
    response_model=CreateFileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_file(
    owner_id: str = Depends(get_caller_id),
    file_service: FileService = Depends(get_file_service),
) -> CreateFileResponse:
    """
    Accept a file upload for the calling owner.

    Args:
        owner_id: Identity of the authenticated caller
        file_service: File service from the application state

    Returns:
        CreateFileResponse: Acknowledgement naming the owner
    """
    return file_service.create_and_enqueue(owner_id)
