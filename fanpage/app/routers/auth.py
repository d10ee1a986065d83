from fastapi import APIRouter, Depends, Response

from fanpage.core.deps import get_current_role
from fanpage.core.enums import AdminRole
from fanpage.core.rate_limit_config import get_rate_limiter
from fanpage.schemas.auth import AuthStatusResponse, LoginRequest, LoginResponse
from fanpage.services import auth_service

router = APIRouter(tags=["auth"])

@router.post("/login", response_model=LoginResponse, dependencies=[Depends(get_rate_limiter("/api/login"))])
async def login(payload: LoginRequest, response: Response):
    """
    비밀번호로 로그인하고 등급을 세션 쿠키(admin_session)로 발급합니다.
    """
    role = auth_service.login(payload.password)
    auth_service.set_session_cookie(response, role)
    return LoginResponse(role=role)

@router.delete("/login")
async def logout(response: Response):
    """
    로그아웃: 세션 쿠키 삭제 (항상 성공)
    """
    auth_service.clear_session_cookie(response)
    return {"ok": True}

@router.get("/auth", response_model=AuthStatusResponse, dependencies=[Depends(get_rate_limiter("/api/auth"))])
async def auth_status(role: AdminRole = Depends(get_current_role)):
    return AuthStatusResponse(role=role, is_admin=role == AdminRole.ADMIN)
