"""Async client for the passport OAuth2 token endpoint.

로그인 요청을 password grant 형태로 변환하여 passport(identity provider)에 전달합니다.
응답 본문은 passport가 소유하므로 가공하지 않고 그대로 반환합니다.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import httpx
from pydantic import BaseModel, ConfigDict

from src.server.schemas import LoginCredentials
from src.server.settings import Settings

logger = logging.getLogger(__name__)


class PassportConfig(BaseModel):
    """Token endpoint configuration, built once at startup."""

    model_config = ConfigDict(frozen=True)

    login_url: str = ""
    client_id: str = ""
    client_secret: str = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> "PassportConfig":
        return cls(
            login_url=settings.PASSPORT_LOGIN_ENDPOINT,
            client_id=settings.PASSPORT_CLIENT_ID,
            client_secret=settings.PASSPORT_CLIENT_SECRET,
        )

    def is_complete(self) -> bool:
        return bool(self.login_url and self.client_id and self.client_secret)


class LoginError(RuntimeError):
    """Raised when a login cannot be relayed through passport."""


class PassportConfigError(LoginError):
    """Raised when the token endpoint is not configured."""


class PassportNetworkError(LoginError):
    """Raised when the token endpoint cannot be reached."""


class PassportRejectedError(LoginError):
    """Raised when passport answers with a non-2xx status (redirects included)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        payload: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class PassportDecodeError(LoginError):
    """Raised when a successful response body is not valid UTF-8 JSON."""


def build_grant_form(
    credentials: LoginCredentials,
    config: PassportConfig,
) -> Dict[str, str]:
    """Build the password grant form body."""
    return {
        "grant_type": "password",
        "client_id": config.client_id,
        "client_secret": config.client_secret,
        "username": credentials.email,
        "password": credentials.password,
        "scope": "*",
    }


def _rejection_message(response: httpx.Response) -> Tuple[str, Optional[Any]]:
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        for key in ("message", "error_description", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value, payload

    return f"Passport responded with status {response.status_code}", payload


async def _post_form(
    client: httpx.AsyncClient,
    url: str,
    form: Dict[str, str],
) -> httpx.Response:
    try:
        return await client.post(
            url,
            data=form,
            headers={"Accept": "application/json"},
        )
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        logger.error("Passport request failed for POST %s: %s", url, exc)
        raise PassportNetworkError(str(exc)) from exc


async def forward_login(
    credentials: LoginCredentials,
    config: PassportConfig,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """Exchange credentials for a passport token response.

    Args:
        credentials: 클라이언트가 제출한 이메일/비밀번호
        config: passport token endpoint 설정
        client: 재사용할 httpx 클라이언트 (없으면 요청마다 새로 생성)

    Returns:
        passport 응답 JSON (수정하지 않음). 본문이 비어 있으면 None.

    Raises:
        PassportConfigError: login URL 미설정
        PassportNetworkError: 전송 실패 (연결 거부, 타임아웃 등)
        PassportRejectedError: 2xx 이외의 응답
        PassportDecodeError: JSON이 아닌 응답 본문
    """
    if not config.login_url:
        raise PassportConfigError("PASSPORT_LOGIN_ENDPOINT is not configured.")

    url = config.login_url
    form = build_grant_form(credentials, config)

    if client is None:
        async with httpx.AsyncClient() as own_client:
            response = await _post_form(own_client, url, form)
    else:
        response = await _post_form(client, url, form)

    if not response.is_success:
        message, payload = _rejection_message(response)
        logger.error(
            "Passport responded with status %s for POST %s: %s",
            response.status_code,
            url,
            response.text[:500],
        )
        raise PassportRejectedError(
            message,
            status_code=response.status_code,
            payload=payload,
        )

    if not response.content:
        return None

    try:
        return response.json()
    except ValueError as exc:
        preview = response.text[:200]
        logger.error("Failed to decode passport JSON response from %s: %s", url, preview)
        raise PassportDecodeError(str(exc)) from exc
