"""Auth API: exchange a sign-in ID token for admin access, and verify a bearer token."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from portfolio_api.api.dependencies import (
    AdminDep,
    get_admin_policy,
    get_token_verifier,
    verify_identity_token,
)
from portfolio_api.application.dtos.identity import VerifiedIdentity
from portfolio_api.application.interfaces.services import ITokenVerifier
from portfolio_api.application.services.admin_policy import AdminPolicy
from portfolio_api.core.limiter import limit_auth
from portfolio_api.domain.exceptions import ValidationException
from portfolio_api.schemas.auth import AuthUser, GoogleLoginData, GoogleLoginRequest, VerifyData
from portfolio_api.schemas.common import ApiResponse

logger = logging.getLogger(__name__)

router = APIRouter()

ADMIN_ONLY_MESSAGE = "Access denied. Only authorized users can access the admin panel."


def _user(identity: VerifiedIdentity) -> AuthUser:
    return AuthUser(email=identity.email, name=identity.name, picture=identity.picture)


@router.post("/google", response_model=ApiResponse[GoogleLoginData])
@limit_auth
async def google_login(
    request: Request,
    body: GoogleLoginRequest,
    verifier: Annotated[ITokenVerifier | None, Depends(get_token_verifier)],
    policy: Annotated[AdminPolicy, Depends(get_admin_policy)],
):
    """Verify the ID token from the sign-in popup and admit only admin identities.

    The same token is returned for use as the bearer credential; nothing is
    returned for non-admins (403).
    """
    if not body.token:
        raise ValidationException("Token is required", field="token")
    identity = await verify_identity_token(body.token, verifier)
    policy.require_admin(identity, ADMIN_ONLY_MESSAGE)
    logger.info("Admin signed in: %s", identity.email)
    return ApiResponse(data=GoogleLoginData(token=body.token, user=_user(identity)))


@router.get("/verify", response_model=ApiResponse[VerifyData])
async def verify(identity: AdminDep):
    """Return the admin behind the bearer token (401/403 otherwise)."""
    return ApiResponse(data=VerifyData(user=_user(identity)))
