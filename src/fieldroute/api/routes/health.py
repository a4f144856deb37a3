"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/provider", status_code=status.HTTP_200_OK)
def health_provider() -> dict:
    """Report which matrix provider is active and whether it has its configuration.

    Does not contact the upstream service; each upstream call costs quota.
    """
    from ...services.routing.dispatcher import get_provider

    try:
        provider = get_provider()
    except ValueError as exc:
        return {"provider": settings.matrix_provider, "configured": False, "error": str(exc)}
    return {"provider": provider.name, "configured": provider.is_configured()}
