"""DTO for an identity whose token has been verified by the identity provider."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class VerifiedIdentity:
    """Claims of a verified ID token (Firebase or Google).

    The raw claims are kept for logging/debugging; only email and
    email_verified take part in the admin decision.
    """

    uid: str
    email: str | None
    email_verified: bool
    name: str | None = None
    picture: str | None = None
    claims: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "VerifiedIdentity":
        """Build from decoded token claims (Firebase uses user_id/sub, Google uses sub)."""
        return cls(
            uid=str(claims.get("user_id") or claims.get("sub") or ""),
            email=claims.get("email"),
            email_verified=bool(claims.get("email_verified", False)),
            name=claims.get("name"),
            picture=claims.get("picture"),
            claims=dict(claims),
        )
