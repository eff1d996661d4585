"""Authenticated user model.

passport가 발급한 access token(JWT)의 클레임으로 구성되는 사용자 정보입니다.
서버는 사용자를 저장하지 않으며, 요청마다 토큰에서 새로 만들어집니다.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """인증된 사용자.

    Attributes:
        id: passport 사용자 ID (JWT `sub`)
        scopes: 토큰에 부여된 scope 목록
        client_id: 토큰을 발급받은 OAuth 클라이언트 (JWT `aud`)
        token_id: 토큰 식별자 (JWT `jti`)
        expires_at: 토큰 만료 시각
    """
    id: str = Field(..., description="Passport user ID")
    scopes: List[str] = Field(default_factory=list, description="Granted scopes")
    client_id: Optional[str] = Field(None, description="OAuth client the token was issued to")
    token_id: Optional[str] = Field(None, description="Token identifier")
    expires_at: Optional[datetime] = Field(None, description="Token expiry")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "42",
                "scopes": ["*"],
                "client_id": "2",
                "token_id": "8f1c0a...",
                "expires_at": "2025-01-01T00:00:00+00:00",
            }
        }

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "AuthenticatedUser":
        """Create an AuthenticatedUser from verified JWT claims."""
        audience = claims.get("aud")
        if isinstance(audience, list):
            audience = audience[0] if audience else None

        scopes = claims.get("scopes") or []
        if isinstance(scopes, str):
            scopes = scopes.split()

        expires_at = None
        exp = claims.get("exp")
        if isinstance(exp, (int, float)):
            expires_at = datetime.fromtimestamp(exp, tz=timezone.utc)

        return cls(
            id=str(claims["sub"]),
            scopes=[str(scope) for scope in scopes],
            client_id=str(audience) if audience is not None else None,
            token_id=claims.get("jti"),
            expires_at=expires_at,
        )
