"""Health check endpoints."""
from fastapi import APIRouter, Depends
from typing import Dict, Any
from src.adapters.passport import PassportConfig
from src.server.deps import get_passport_config, get_settings
from src.server.settings import Settings

router = APIRouter()


@router.get("/healthz")
async def health_check() -> Dict[str, str]:
    """Basic health check endpoint.

    Returns:
        Simple status response
    """
    return {"status": "ok"}


@router.get("/readyz")
async def readiness_check(
    config: PassportConfig = Depends(get_passport_config),
    app_settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Readiness check endpoint.

    Checks if the passport configuration is populated.

    Returns:
        Status response with readiness info
    """
    checks = {
        "passport_login_endpoint": bool(config.login_url),
        "passport_client_id": bool(config.client_id),
        "passport_client_secret": bool(config.client_secret),
        "passport_public_key": bool(app_settings.PASSPORT_PUBLIC_KEY),
    }

    ready = all(checks.values())

    return {
        "status": "ok" if ready else "not_ready",
        "checks": checks
    }
