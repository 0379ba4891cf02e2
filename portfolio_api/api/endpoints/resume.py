"""Resume API: experiences, education, skills and certifications, each ordered by ``order``."""

from fastapi import APIRouter

from portfolio_api.api.crud import build_crud_router
from portfolio_api.api.dependencies import (
    get_certification_repo,
    get_education_repo,
    get_experience_repo,
    get_skill_repo,
)
from portfolio_api.schemas.resume import (
    CertificationCreate,
    CertificationResponse,
    CertificationUpdate,
    EducationCreate,
    EducationResponse,
    EducationUpdate,
    ExperienceCreate,
    ExperienceResponse,
    ExperienceUpdate,
    SkillCategoryCreate,
    SkillCategoryResponse,
    SkillCategoryUpdate,
)

router = APIRouter()

router.include_router(
    build_crud_router(
        get_repo=get_experience_repo,
        create_schema=ExperienceCreate,
        update_schema=ExperienceUpdate,
        response_schema=ExperienceResponse,
    ),
    prefix="/experiences",
)
router.include_router(
    build_crud_router(
        get_repo=get_education_repo,
        create_schema=EducationCreate,
        update_schema=EducationUpdate,
        response_schema=EducationResponse,
    ),
    prefix="/education",
)
router.include_router(
    build_crud_router(
        get_repo=get_skill_repo,
        create_schema=SkillCategoryCreate,
        update_schema=SkillCategoryUpdate,
        response_schema=SkillCategoryResponse,
    ),
    prefix="/skills",
)
router.include_router(
    build_crud_router(
        get_repo=get_certification_repo,
        create_schema=CertificationCreate,
        update_schema=CertificationUpdate,
        response_schema=CertificationResponse,
    ),
    prefix="/certifications",
)
