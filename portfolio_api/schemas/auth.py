"""Auth API schemas."""

from pydantic import BaseModel, Field


class GoogleLoginRequest(BaseModel):
    """Request body for POST /auth/google (identity token from the sign-in popup)."""

    token: str | None = Field(default=None, description="Firebase or Google ID token")


class AuthUser(BaseModel):
    email: str | None = None
    name: str | None = None
    picture: str | None = None


class GoogleLoginData(BaseModel):
    """``data`` of POST /auth/google. token is the same ID token, reusable as bearer."""

    token: str
    user: AuthUser


class VerifyData(BaseModel):
    user: AuthUser
