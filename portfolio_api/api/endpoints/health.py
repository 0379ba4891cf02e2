"""Health check endpoint."""

from fastapi import APIRouter

from portfolio_api.infrastructure.firebase.client import get_firestore_client
from portfolio_api.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness; also reports whether Firestore is configured."""
    return HealthResponse(database=get_firestore_client() is not None)
