"""Contact details API schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field

from portfolio_api.schemas.common import CamelModel


class SocialLinks(CamelModel):
    """Known networks plus any extra ones the admin adds."""

    model_config = ConfigDict(extra="allow")

    github: str | None = None
    linkedin: str | None = None
    twitter: str | None = None


class ContactDetailsUpdate(CamelModel):
    """Request body for PUT /contact-details; only given fields are written."""

    email: str | None = Field(default=None, max_length=320)
    phone: str | None = None
    location: str | None = None
    social_links: SocialLinks | None = None


class ContactDetailsResponse(CamelModel):
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    updated_at: datetime | None = None
