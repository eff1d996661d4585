"""Application settings loaded from environment variables."""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application configuration settings."""

    # Server Configuration
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # Passport (OAuth2 password grant)
    PASSPORT_LOGIN_ENDPOINT: str = ""
    PASSPORT_CLIENT_ID: str = ""
    PASSPORT_CLIENT_SECRET: str = ""

    # Passport 발급 access token 검증용
    PASSPORT_PUBLIC_KEY: Optional[str] = None  # PEM (oauth-public.key)
    PASSPORT_JWT_ALGORITHMS: str = "RS256"
    PASSPORT_JWT_AUDIENCE: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
