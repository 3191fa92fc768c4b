"""Health check route."""

from fastapi import APIRouter

from ..config import get_lint_config

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check, with the thresholds the service lints against."""
    return {"status": "ok", "thresholds": get_lint_config().as_dict()}
