"""Security utilities for verifying passport-issued access tokens."""
from __future__ import annotations

import logging
from typing import Any, Dict, List

import jwt
from jwt import PyJWTError

from src.server.settings import Settings

logger = logging.getLogger(__name__)


class JWTVerificationError(Exception):
    """Raised when a JWT cannot be verified."""


def _get_algorithms(settings: Settings) -> List[str]:
    algorithms = [
        alg.strip()
        for alg in settings.PASSPORT_JWT_ALGORITHMS.split(",")
        if alg.strip()
    ]
    return algorithms or ["RS256"]


def verify_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """Verify a passport access token and return its payload.

    Raises:
        JWTVerificationError: 공개키 미설정, 서명/만료/audience 검증 실패
    """
    if not settings.PASSPORT_PUBLIC_KEY:
        raise JWTVerificationError("PASSPORT_PUBLIC_KEY is not configured.")

    audience = settings.PASSPORT_JWT_AUDIENCE

    try:
        payload = jwt.decode(
            token,
            settings.PASSPORT_PUBLIC_KEY,
            algorithms=_get_algorithms(settings),
            audience=audience,
            options={"verify_aud": audience is not None},
        )
    except PyJWTError as exc:
        logger.warning("JWT verification failed: %s", exc)
        raise JWTVerificationError(str(exc)) from exc

    if not payload.get("sub"):
        raise JWTVerificationError("Token missing subject")

    return payload
