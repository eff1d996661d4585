"""Pydantic schemas for request/response models.

이 파일은 FastAPI 엔드포인트의 요청/응답 모델을 정의합니다.
모든 스키마는 Pydantic BaseModel을 상속받아 자동 검증 및 문서화를 지원합니다.
"""
from typing import List
from pydantic import BaseModel, Field


# ============================================================================
# Auth 관련 스키마
# ============================================================================

class LoginCredentials(BaseModel):
    """로그인 요청 본문.

    요청 처리 중에만 사용되며 저장하지 않습니다.
    """
    email: str = Field(..., min_length=1, description="User email (passport username)")
    password: str = Field(..., min_length=1, description="User password")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "user@example.com",
                "password": "secret",
            }
        }


class RegisterRequest(BaseModel):
    """회원가입 요청 본문 (검증만 수행)."""
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    password_confirmation: str = Field(..., min_length=1)


class LoginErrorResponse(BaseModel):
    """로그인 실패 응답. message 리스트에 원본 오류 메시지 하나가 담깁니다."""
    message: List[str]
