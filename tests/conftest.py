"""Pytest configuration and fixtures.

이 모듈은 모든 테스트에서 공유되는 pytest fixture들을 정의합니다.

주요 Fixture:
- passport_config: 테스트용 passport token endpoint 설정
- client: FastAPI 테스트 클라이언트 (lifespan 실행, passport 설정 주입)
- rsa_keys: access token 서명/검증용 RSA 키 쌍
- auth_settings: 테스트 공개키가 설정된 Settings
- make_token: passport 형식의 access token 생성 함수
- auth_headers: 유효한 Bearer 토큰 헤더

외부 passport 서버는 호출하지 않습니다. 어댑터 테스트는 httpx.MockTransport를,
라우터 테스트는 unittest.mock으로 forward_login을 대체합니다.
"""
import time
from typing import Any, Dict

import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from fastapi.testclient import TestClient

from src.adapters.passport import PassportConfig
from src.server.deps import get_passport_config, get_settings
from src.server.main import app
from src.server.settings import Settings


@pytest.fixture
def passport_config():
    """테스트용 passport 설정.

    Returns:
        PassportConfig: 가상의 token endpoint와 클라이언트 자격 증명
    """
    return PassportConfig(
        login_url="http://passport.test/oauth/token",
        client_id="2",
        client_secret="client-secret",
    )


@pytest.fixture(scope="session")
def rsa_keys():
    """passport의 oauth-private.key / oauth-public.key 역할을 하는 RSA 키 쌍."""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()
    return private_pem, public_pem


@pytest.fixture
def auth_settings(rsa_keys):
    """테스트 공개키로 토큰을 검증하는 Settings."""
    _, public_pem = rsa_keys
    return Settings(
        PASSPORT_PUBLIC_KEY=public_pem,
        PASSPORT_JWT_ALGORITHMS="RS256",
    )


@pytest.fixture
def make_token(rsa_keys):
    """passport 형식의 access token을 생성하는 함수를 반환합니다.

    사용법:
        token = make_token(sub="42", exp_offset=-10)  # 만료된 토큰
    """
    private_pem, _ = rsa_keys

    def _make(exp_offset: int = 3600, **overrides: Any) -> str:
        now = int(time.time())
        claims: Dict[str, Any] = {
            "aud": "2",
            "jti": "token-id-1",
            "iat": now,
            "nbf": now,
            "exp": now + exp_offset,
            "sub": "42",
            "scopes": ["*"],
        }
        claims.update(overrides)
        return jwt.encode(claims, private_pem, algorithm="RS256")

    return _make


@pytest.fixture
def auth_headers(make_token):
    """유효한 Bearer 토큰 헤더."""
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def client(passport_config, auth_settings):
    """FastAPI 테스트 클라이언트를 생성합니다.

    설명:
        - with 블록으로 lifespan을 실행
        - passport 설정과 Settings는 dependency override로 주입
    """
    app.dependency_overrides[get_passport_config] = lambda: passport_config
    app.dependency_overrides[get_settings] = lambda: auth_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
