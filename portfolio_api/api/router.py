"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. Mounted
under /api by portfolio_api.main.
"""

from fastapi import APIRouter

from portfolio_api.api.endpoints import (
    auth,
    contact_details,
    currency,
    health,
    pricing,
    projects,
    resume,
    services,
    upload,
    version,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(pricing.router, prefix="/pricing", tags=["pricing"])
api_router.include_router(services.router, prefix="/services", tags=["services"])
api_router.include_router(resume.router, prefix="/resume", tags=["resume"])
api_router.include_router(
    contact_details.router, prefix="/contact-details", tags=["contact-details"]
)
api_router.include_router(version.router, prefix="/version", tags=["version"])
api_router.include_router(upload.router, prefix="/upload", tags=["upload"])
api_router.include_router(currency.router, prefix="/currency", tags=["currency"])
