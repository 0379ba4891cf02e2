"""Firestore repository implementations."""

from portfolio_api.infrastructure.firebase.repositories.base import (
    FirestoreDocumentRepository,
)
from portfolio_api.infrastructure.firebase.repositories.content_repo_firestore import (
    FirestorePricingRepository,
    FirestoreProjectRepository,
    FirestoreServiceRepository,
)
from portfolio_api.infrastructure.firebase.repositories.resume_repo_firestore import (
    FirestoreCertificationRepository,
    FirestoreEducationRepository,
    FirestoreExperienceRepository,
    FirestoreSkillRepository,
)
from portfolio_api.infrastructure.firebase.repositories.singleton_repo_firestore import (
    FirestoreContactDetailsRepository,
    FirestoreSingletonRepository,
    FirestoreVersionRepository,
)

__all__ = [
    "FirestoreCertificationRepository",
    "FirestoreContactDetailsRepository",
    "FirestoreDocumentRepository",
    "FirestoreEducationRepository",
    "FirestoreExperienceRepository",
    "FirestorePricingRepository",
    "FirestoreProjectRepository",
    "FirestoreServiceRepository",
    "FirestoreSingletonRepository",
    "FirestoreSkillRepository",
    "FirestoreVersionRepository",
]
