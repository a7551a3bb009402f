"""Health check routes."""

from fastapi import APIRouter, Query

from ..ai_status import get_ai_status

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check. The rule engine does not depend on the analyzer."""
    return {"status": "ok"}


@router.get("/health/ai")
def health_ai(probe: bool = Query(default=False, description="Send a minimal request to the provider")) -> dict:
    """External analyzer availability."""
    return get_ai_status(probe=probe)
