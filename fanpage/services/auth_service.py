import logging
from fastapi import Response

from fanpage.core import constants, security
from fanpage.core.enums import AdminRole
from fanpage.core.exceptions import InvalidCredentialsError, ServerMisconfiguredError

logger = logging.getLogger(__name__)

def login(password: str) -> AdminRole:
    """
    등급별 비밀번호와 비교해 등급을 반환합니다.
    실패 시 상세 없이 동일한 거부 메시지를 사용합니다.
    """
    secrets = security.configured_role_passwords()
    if not secrets:
        logger.error("❌ No admin/staff/visitor password is configured")
        raise ServerMisconfiguredError()

    role = security.verify_admin_password(password, secrets)
    if role is None:
        raise InvalidCredentialsError()
    logger.info(f"🔑 Login succeeded (role={role.value})")
    return role

def set_session_cookie(response: Response, role: AdminRole) -> None:
    # 만료 없음: 브라우저 세션 쿠키
    response.set_cookie(
        key=constants.ADMIN_SESSION_COOKIE,
        value=role.value,
        httponly=True,
        path="/",
        samesite="lax",
    )

def clear_session_cookie(response: Response) -> None:
    response.set_cookie(
        key=constants.ADMIN_SESSION_COOKIE,
        value="",
        max_age=0,
        httponly=True,
        path="/",
        samesite="lax",
    )
