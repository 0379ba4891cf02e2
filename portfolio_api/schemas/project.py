"""Project API schemas."""

from pydantic import AliasChoices, Field

from portfolio_api.domain.enums import ProjectCategory
from portfolio_api.schemas.common import CamelModel, DocumentResponse


class ProjectFields(CamelModel):
    """Writable project fields. Older clients send tech/github/live."""

    title: str | None = Field(default=None, max_length=200)
    description: str | None = None
    image: str | None = None
    technologies: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("technologies", "tech"),
    )
    github_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("githubUrl", "github_url", "github"),
    )
    live_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("liveUrl", "live_url", "live"),
    )
    category: ProjectCategory | None = None


class ProjectCreate(ProjectFields):
    """Request body for POST /projects (no required fields)."""

    technologies: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("technologies", "tech"),
    )


class ProjectUpdate(ProjectFields):
    """Request body for PUT /projects/{id}; null or omitted fields are kept."""


class ProjectResponse(DocumentResponse):
    title: str | None = None
    description: str | None = None
    image: str | None = None
    technologies: list[str] = Field(default_factory=list)
    github_url: str | None = None
    live_url: str | None = None
    category: str | None = None
