"""Authentication endpoints.

로그인은 passport(OAuth2 identity provider)의 token endpoint로 그대로 전달합니다.
토큰 저장, 세션 관리는 하지 않으며 모두 passport에 위임합니다.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.adapters import passport
from src.adapters.passport import LoginError, PassportConfig
from src.models.user import AuthenticatedUser
from src.server.deps import get_current_user, get_passport_config
from src.server.schemas import LoginCredentials, LoginErrorResponse, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/post-login",
    response_model=None,
    responses={status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": LoginErrorResponse}},
)
async def post_login(
    credentials: LoginCredentials,
    config: PassportConfig = Depends(get_passport_config),
) -> Any:
    """Password grant 로그인.

    Returns:
        passport 응답 JSON (access_token, expires_in 등)을 가공 없이 반환.
        실패 시 422와 함께 {"message": ["<원본 오류 메시지>"]}.
    """
    try:
        return await passport.forward_login(credentials, config)
    except LoginError as exc:
        logger.warning("Login relay failed (%s): %s", type(exc).__name__, exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=LoginErrorResponse(message=[str(exc)]).model_dump(),
        )


@router.post("/register")
async def register(request: RegisterRequest) -> JSONResponse:
    """회원가입 placeholder. 입력과 무관하게 200 / null."""
    return JSONResponse(status_code=status.HTTP_200_OK, content=None)


@router.post("/logout")
async def logout(user: AuthenticatedUser = Depends(get_current_user)) -> JSONResponse:
    """로그아웃 확인.

    서버는 토큰 상태를 보관하지 않으므로 인증된 호출만 확인하고 200 / null을 반환합니다.
    토큰 폐기는 passport의 책임입니다.
    """
    logger.info("User %s logged out", user.id)
    return JSONResponse(status_code=status.HTTP_200_OK, content=None)


@router.post("/user-info", response_model=AuthenticatedUser)
async def user_info(user: AuthenticatedUser = Depends(get_current_user)) -> AuthenticatedUser:
    """토큰에서 확인한 현재 사용자 정보."""
    return user
