"""FastAPI dependencies (composition root).

Routes get repositories, storage, the currency service and the admin gate
from here; tests swap any of them through app.dependency_overrides.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portfolio_api.application.dtos.identity import VerifiedIdentity
from portfolio_api.application.interfaces.repositories import IVersionStore
from portfolio_api.application.interfaces.services import ITokenVerifier
from portfolio_api.application.services.admin_policy import AdminPolicy
from portfolio_api.application.services.currency_service import CurrencyService
from portfolio_api.core.config import Settings, get_settings
from portfolio_api.domain.exceptions import (
    AuthenticationException,
    ServiceUnavailableException,
)
from portfolio_api.infrastructure.external.storage.protocol import StorageProtocol
from portfolio_api.infrastructure.firebase._rest_client import FirestoreRESTClient
from portfolio_api.infrastructure.firebase.client import (
    get_firestore_client,
    load_service_account_info,
)
from portfolio_api.infrastructure.firebase.repositories import (
    FirestoreCertificationRepository,
    FirestoreContactDetailsRepository,
    FirestoreEducationRepository,
    FirestoreExperienceRepository,
    FirestorePricingRepository,
    FirestoreProjectRepository,
    FirestoreServiceRepository,
    FirestoreSkillRepository,
    FirestoreVersionRepository,
)
from portfolio_api.infrastructure.persistence.version_file import VersionFileStore

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


# ---- Persistence ----


def get_optional_db() -> FirestoreRESTClient | None:
    """Firestore client, or None when no service account is configured."""
    return get_firestore_client()


def get_db(
    db: Annotated[FirestoreRESTClient | None, Depends(get_optional_db)],
) -> FirestoreRESTClient:
    """Firestore client; 503 when not configured."""
    if db is None:
        raise ServiceUnavailableException("Database not configured")
    return db


DbDep = Annotated[FirestoreRESTClient, Depends(get_db)]


def get_project_repo(db: DbDep) -> FirestoreProjectRepository:
    return FirestoreProjectRepository(db)


def get_pricing_repo(db: DbDep) -> FirestorePricingRepository:
    return FirestorePricingRepository(db)


def get_service_repo(db: DbDep) -> FirestoreServiceRepository:
    return FirestoreServiceRepository(db)


def get_experience_repo(db: DbDep) -> FirestoreExperienceRepository:
    return FirestoreExperienceRepository(db)


def get_education_repo(db: DbDep) -> FirestoreEducationRepository:
    return FirestoreEducationRepository(db)


def get_skill_repo(db: DbDep) -> FirestoreSkillRepository:
    return FirestoreSkillRepository(db)


def get_certification_repo(db: DbDep) -> FirestoreCertificationRepository:
    return FirestoreCertificationRepository(db)


def get_contact_details_repo(db: DbDep) -> FirestoreContactDetailsRepository:
    return FirestoreContactDetailsRepository(db)


def get_version_store(
    db: Annotated[FirestoreRESTClient | None, Depends(get_optional_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> IVersionStore:
    """Firestore version record, or the JSON file when Firestore is not configured."""
    if db is not None:
        return FirestoreVersionRepository(db)
    return VersionFileStore(settings.version_file_path)


# ---- Storage and currency (built in lifespan, held on app.state) ----


def get_storage(request: Request) -> StorageProtocol:
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise ServiceUnavailableException("File storage not configured")
    return storage


def get_currency_service(request: Request) -> CurrencyService:
    service = getattr(request.app.state, "currency_service", None)
    if service is None:
        raise ServiceUnavailableException("Currency service not available")
    return service


# ---- Identity and admin gate ----


@lru_cache
def _build_verifier(provider: str, audience: str) -> ITokenVerifier:
    from portfolio_api.infrastructure.firebase.auth import (
        FirebaseTokenVerifier,
        GoogleTokenVerifier,
    )

    if provider == "google":
        return GoogleTokenVerifier(audience)
    return FirebaseTokenVerifier(audience)


def _firebase_project_id(settings: Settings) -> str | None:
    if settings.firebase_project_id:
        return settings.firebase_project_id
    try:
        info = load_service_account_info(settings)
    except ValueError:
        logger.exception("Could not read Firebase project ID from service account")
        return None
    return info.get("project_id") if info else None


def get_token_verifier(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ITokenVerifier | None:
    """Verifier for the configured identity provider; None if its audience is unknown."""
    if settings.auth_provider == "google":
        audience = settings.google_client_id
    else:
        audience = _firebase_project_id(settings)
    if not audience:
        return None
    return _build_verifier(settings.auth_provider, audience)


def get_admin_policy(
    settings: Annotated[Settings, Depends(get_settings)],
) -> AdminPolicy:
    return AdminPolicy(settings.admin_email_list, settings.require_verified_email)


async def verify_identity_token(
    token: str | None, verifier: ITokenVerifier | None
) -> VerifiedIdentity:
    """Verify a raw token. 401 if missing or invalid; 503 if no provider is configured."""
    if not token:
        raise AuthenticationException("No token provided")
    if verifier is None:
        raise ServiceUnavailableException("Authentication not configured")
    return await verifier.verify(token)


async def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer)],
    verifier: Annotated[ITokenVerifier | None, Depends(get_token_verifier)],
) -> VerifiedIdentity:
    """Identity from Authorization: Bearer <token>."""
    token = credentials.credentials if credentials else None
    return await verify_identity_token(token, verifier)


async def require_admin(
    identity: Annotated[VerifiedIdentity, Depends(get_current_identity)],
    policy: Annotated[AdminPolicy, Depends(get_admin_policy)],
) -> VerifiedIdentity:
    """Gate for admin-only endpoints: 401 without a valid token, 403 for non-admins."""
    return policy.require_admin(identity)


AdminDep = Annotated[VerifiedIdentity, Depends(require_admin)]
