"""Dependency injection for FastAPI routes.

- get_passport_config: 시작 시 한 번 생성된 passport 설정을 주입
- get_current_user: Bearer 토큰을 검증하여 AuthenticatedUser를 주입
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.adapters.passport import PassportConfig
from src.models.user import AuthenticatedUser
from src.server.security import JWTVerificationError, verify_access_token
from src.server.settings import Settings, settings

logger = logging.getLogger(__name__)

# auto_error=False: 헤더 누락도 401로 처리
security = HTTPBearer(auto_error=False)


def get_settings() -> Settings:
    return settings


def get_passport_config(request: Request) -> PassportConfig:
    """Return the passport config stored on app state by the lifespan."""
    config: Optional[PassportConfig] = getattr(request.app.state, "passport_config", None)
    if config is None:
        logger.error("Passport config requested before application startup")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service is not ready",
        )
    return config


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    app_settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """Bearer 토큰으로 현재 사용자를 인증합니다.

    Returns:
        인증된 AuthenticatedUser 객체

    Raises:
        HTTPException: 401 - 토큰 누락 또는 검증 실패
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = verify_access_token(credentials.credentials, app_settings)
    except JWTVerificationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc

    return AuthenticatedUser.from_claims(payload)
