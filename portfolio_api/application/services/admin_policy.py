"""Admin predicate over verified identity claims."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from portfolio_api.application.dtos.identity import VerifiedIdentity
from portfolio_api.domain.exceptions import AuthorizationException

logger = logging.getLogger(__name__)


class AdminPolicy:
    """Decides whether a verified identity may use admin endpoints.

    An identity is an admin when its email (case-insensitive) is in the
    configured set and, if ``require_verified_email`` is on, the provider
    marked that email as verified.
    """

    def __init__(
        self, admin_emails: Iterable[str], require_verified_email: bool = True
    ) -> None:
        self.admin_emails = frozenset(e.strip().lower() for e in admin_emails if e.strip())
        self.require_verified_email = require_verified_email

    def is_admin(self, identity: VerifiedIdentity) -> bool:
        if not identity.email:
            return False
        if self.require_verified_email and not identity.email_verified:
            return False
        return identity.email.strip().lower() in self.admin_emails

    def require_admin(
        self, identity: VerifiedIdentity, message: str = "Access denied"
    ) -> VerifiedIdentity:
        """Return the identity if it is an admin; raise AuthorizationException otherwise."""
        if not self.is_admin(identity):
            logger.warning("Admin access denied for %s", identity.email or identity.uid)
            raise AuthorizationException(message, email=identity.email)
        return identity
