"""Upload API schemas."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Stored object name and its public URL."""

    fileName: str
    url: str
