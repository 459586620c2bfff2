from fastapi import HTTPException, Request, status

from files_api.services import FileService


def get_file_service(request: Request) -> FileService:
    """File service wired into the app by `create_app`."""
    return request.app.state.file_service


def get_caller_id(request: Request) -> str:
    """
    Identity of the authenticated caller.

    Authentication happens upstream of this app: whatever authenticates the
    request must place a user object with an `id` attribute on
    `request.state.user`. Requests without one are rejected.
    """
    user = getattr(request.state, "user", None)
    caller_id = getattr(user, "id", None)
    if not caller_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Caller identity not available",
        )
    return str(caller_id)
