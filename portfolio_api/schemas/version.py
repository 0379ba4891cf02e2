"""Site version API schemas."""

import re
from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from portfolio_api.schemas.common import CamelModel, is_blank

SEMVER_PATTERN = re.compile(r"^\d+\.\d+\.\d+([-+].*)?$")


class VersionUpdate(BaseModel):
    """Request body for POST/PUT /version."""

    version: str | None = Field(default=None, max_length=64, examples=["1.2.0"])

    @model_validator(mode="after")
    def check_required(self) -> "VersionUpdate":
        if is_blank(self.version):
            raise PydanticCustomError("missing_fields", "Version is required")
        return self

    @field_validator("version")
    @classmethod
    def check_format(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return v
        v = v.strip()
        if not SEMVER_PATTERN.match(v):
            raise PydanticCustomError(
                "version_format", "Version must look like MAJOR.MINOR.PATCH"
            )
        return v


class VersionResponse(CamelModel):
    version: str
    last_updated: datetime | None = None
