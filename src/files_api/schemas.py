####################################
# --- Request/response schemas --- #
####################################

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)


class CreateFileResponse(BaseModel):
    """Response model for `POST /files`."""
    message: str = Field(
        description="Acknowledgement that the file was accepted for the owner.",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "File created and enqueued for owner abc123",
            }
        }
    )
