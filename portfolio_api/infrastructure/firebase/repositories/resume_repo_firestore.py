"""Firestore repositories for the four resume sections (ordered by ``order``)."""

from portfolio_api.infrastructure.firebase.collections import (
    COLLECTION_RESUME_CERTIFICATIONS,
    COLLECTION_RESUME_EDUCATION,
    COLLECTION_RESUME_EXPERIENCES,
    COLLECTION_RESUME_SKILLS,
)
from portfolio_api.infrastructure.firebase.repositories.base import (
    FirestoreDocumentRepository,
)


class FirestoreExperienceRepository(FirestoreDocumentRepository):
    collection_name = COLLECTION_RESUME_EXPERIENCES
    resource_name = "Experience"
    singular = "experience"
    plural = "experiences"
    order_field = "order"


class FirestoreEducationRepository(FirestoreDocumentRepository):
    collection_name = COLLECTION_RESUME_EDUCATION
    resource_name = "Education"
    singular = "education"
    plural = "education"
    order_field = "order"


class FirestoreSkillRepository(FirestoreDocumentRepository):
    collection_name = COLLECTION_RESUME_SKILLS
    resource_name = "Skill"
    singular = "skill"
    plural = "skills"
    order_field = "order"


class FirestoreCertificationRepository(FirestoreDocumentRepository):
    collection_name = COLLECTION_RESUME_CERTIFICATIONS
    resource_name = "Certification"
    singular = "certification"
    plural = "certifications"
    order_field = "order"
