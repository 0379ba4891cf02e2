"""Shared API schemas: response envelopes and the camelCase base model."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

T = TypeVar("T")


class CamelModel(BaseModel):
    """Python attributes in snake_case, JSON (and Firestore fields) in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        """Fields to write: camelCase keys, None values left out."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class DocumentResponse(CamelModel):
    """Fields every stored document carries."""

    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: {"success": true, "data": ...}."""

    success: bool = True
    data: T


class MessageResponse(BaseModel):
    """Success envelope without data (deletes)."""

    success: bool = True
    message: str = Field(..., description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """Error envelope returned by every exception handler."""

    success: bool = False
    error: str


def is_blank(value: object) -> bool:
    """None or a string with nothing but whitespace."""
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(model: BaseModel, fields: tuple[str, ...], message: str) -> None:
    """Raise a validation error with ``message`` if any field is blank.

    Raised from model validators so FastAPI reports it as a 400 with the
    message unchanged.
    """
    if any(is_blank(getattr(model, name)) for name in fields):
        raise PydanticCustomError("missing_fields", message)
