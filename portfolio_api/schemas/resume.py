"""Resume section API schemas (experience, education, skills, certifications).

Create bodies enforce the section's required fields with the exact 400
message the admin panel displays; update bodies are partial.
"""

from typing import Self

from pydantic import Field, model_validator

from portfolio_api.schemas.common import CamelModel, DocumentResponse, require_fields


class ExperienceFields(CamelModel):
    title: str | None = None
    company: str | None = None
    period: str | None = None
    description: str | None = None
    achievements: list[str] | None = None
    order: int | None = None


class ExperienceCreate(ExperienceFields):
    achievements: list[str] = Field(default_factory=list)
    order: int = 0

    @model_validator(mode="after")
    def check_required(self) -> Self:
        require_fields(
            self,
            ("title", "company", "period", "description"),
            "Title, company, period, and description are required",
        )
        return self


class ExperienceUpdate(ExperienceFields):
    pass


class ExperienceResponse(DocumentResponse):
    title: str | None = None
    company: str | None = None
    period: str | None = None
    description: str | None = None
    achievements: list[str] = Field(default_factory=list)
    order: int = 0


class EducationFields(CamelModel):
    degree: str | None = None
    school: str | None = None
    period: str | None = None
    achievements: list[str] | None = None
    order: int | None = None


class EducationCreate(EducationFields):
    achievements: list[str] = Field(default_factory=list)
    order: int = 0

    @model_validator(mode="after")
    def check_required(self) -> Self:
        require_fields(
            self, ("degree", "school", "period"), "Degree, school, and period are required"
        )
        return self


class EducationUpdate(EducationFields):
    pass


class EducationResponse(DocumentResponse):
    degree: str | None = None
    school: str | None = None
    period: str | None = None
    achievements: list[str] = Field(default_factory=list)
    order: int = 0


class SkillCategoryFields(CamelModel):
    category: str | None = None
    items: list[str] | None = None
    order: int | None = None


class SkillCategoryCreate(SkillCategoryFields):
    order: int = 0

    @model_validator(mode="after")
    def check_required(self) -> Self:
        require_fields(self, ("category", "items"), "Category and items array are required")
        return self


class SkillCategoryUpdate(SkillCategoryFields):
    pass


class SkillCategoryResponse(DocumentResponse):
    category: str | None = None
    items: list[str] = Field(default_factory=list)
    order: int = 0


class CertificationFields(CamelModel):
    name: str | None = None
    issuer: str | None = None
    date: str | None = None
    pdf_url: str | None = None
    order: int | None = None


class CertificationCreate(CertificationFields):
    issuer: str = ""
    date: str = ""
    pdf_url: str = ""
    order: int = 0

    @model_validator(mode="after")
    def check_required(self) -> Self:
        require_fields(self, ("name",), "Certification name is required")
        return self


class CertificationUpdate(CertificationFields):
    pass


class CertificationResponse(DocumentResponse):
    name: str | None = None
    issuer: str = ""
    date: str = ""
    pdf_url: str = ""
    order: int = 0
