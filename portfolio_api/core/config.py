"""Environment-driven settings for the portfolio API (pydantic-settings, .env aware)."""

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def split_csv(value: str) -> list[str]:
    """Split a comma-separated setting into stripped, non-empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Portfolio API settings.

    Firestore is optional at load time: when no service account is configured
    the app still starts, data endpoints answer 503 and the version record
    falls back to VERSION_FILE_PATH.
    """

    # App
    app_name: str = "portfolio-api"
    app_version: str = "1.0.0"
    debug: bool = False
    port: int = 5000

    # Admin identity: comma-separated list; ADMIN_EMAIL (single) also accepted.
    admin_emails: str = Field(
        default="admin@example.com",
        validation_alias=AliasChoices("admin_emails", "admin_email"),
    )
    require_verified_email: bool = True

    # Identity provider: "firebase" (Firebase ID tokens) or "google" (Google Sign-In ID tokens)
    auth_provider: str = "firebase"
    google_client_id: str | None = None

    # Firebase: full JSON key (env), key file path, or split project/email/private key.
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None
    firebase_project_id: str | None = None
    firebase_client_email: str | None = None
    firebase_private_key: SecretStr | None = None

    # CORS
    allowed_origins: str = "http://localhost:5173"

    # Storage
    storage_backend: str = "firebase"
    firebase_storage_bucket: str | None = None
    storage_root: str = "./uploads"
    storage_base_url: str | None = None
    max_upload_size: int = 5 * 1024 * 1024  # 5MB
    allowed_upload_mime_types: str = "image/jpeg,image/png,image/webp,application/pdf"

    # Request / middleware
    max_request_size: int = 10 * 1024 * 1024  # 10MB (multipart overhead above max_upload_size)
    request_id_header: str = "X-Request-ID"
    rate_limit_enabled: bool = True

    # Currency
    exchange_rate_api_url: str = "https://api.exchangerate-api.com/v4/latest/USD"
    geolocation_api_url: str = "https://ipapi.co/{ip}/json/"
    exchange_rate_cache_seconds: int = 3600
    external_http_timeout_seconds: float = 10.0

    # Version record fallback when Firestore is not configured
    version_file_path: str = "./version.json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    @property
    def admin_email_list(self) -> list[str]:
        """Configured admin emails, lower-cased."""
        return [e.lower() for e in split_csv(self.admin_emails)]

    @property
    def allowed_origin_list(self) -> list[str]:
        return split_csv(self.allowed_origins)

    @property
    def allowed_upload_mime_type_list(self) -> list[str]:
        return [m.lower() for m in split_csv(self.allowed_upload_mime_types)]

    @model_validator(mode="after")
    def validate_backends(self) -> "Settings":
        """Validate admin emails, identity provider and storage backend.

        - google auth provider: GOOGLE_CLIENT_ID required.
        - firebase storage: FIREBASE_STORAGE_BUCKET required.
        - local storage: STORAGE_ROOT required.
        """
        if not self.admin_email_list:
            raise ValueError(
                "ADMIN_EMAILS is required (comma-separated list of admin email addresses)."
            )
        if self.auth_provider == "google":
            if not self.google_client_id:
                raise ValueError(
                    "GOOGLE_CLIENT_ID is required when auth_provider is 'google'."
                )
        elif self.auth_provider != "firebase":
            raise ValueError(
                f"auth_provider must be 'firebase' or 'google', got: {self.auth_provider!r}"
            )
        if self.storage_backend == "firebase":
            if not self.firebase_storage_bucket:
                raise ValueError(
                    "FIREBASE_STORAGE_BUCKET is required when storage_backend is 'firebase'. "
                    "Set it in the environment or .env file, or use STORAGE_BACKEND=local."
                )
        elif self.storage_backend == "local":
            if not self.storage_root:
                raise ValueError("STORAGE_ROOT is required when storage_backend is 'local'.")
        else:
            raise ValueError(
                f"Invalid storage_backend '{self.storage_backend}'. "
                "Must be one of: 'firebase', 'local'"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Process-wide Settings, built and validated on first use.

    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()
