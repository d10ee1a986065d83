import logging
from typing import Optional
from fastapi import Cookie, Depends, Header

from fanpage.core import constants, security
from fanpage.core.config import settings
from fanpage.core.enums import AdminRole
from fanpage.core.exceptions import InvalidApiKeyError, PermissionDeniedError

logger = logging.getLogger(__name__)


async def get_current_role(
    admin_session: Optional[str] = Cookie(default=None, alias=constants.ADMIN_SESSION_COOKIE),
) -> AdminRole:
    """
    요청의 admin_session 쿠키로 등급을 반환합니다. (없으면 GUEST)
    """
    return security.resolve_role(admin_session)


def require_role(*roles: AdminRole):
    """
    지정한 등급 중 하나인 요청만 통과시키는 의존성을 만듭니다.
    각 권한 작업은 허용 등급을 정확히 명시해야 합니다.
    """
    async def _guard(role: AdminRole = Depends(get_current_role)) -> AdminRole:
        if not security.authorize(role, *roles):
            raise PermissionDeniedError()
        return role
    return _guard


require_admin = require_role(AdminRole.ADMIN)


async def verify_bot_worker(
    x_api_key: Optional[str] = Header(default=None, alias=constants.BOT_API_KEY_HEADER),
) -> None:
    """봇 워커 전용 API Key 확인 (X-API-Key)"""
    if not settings.BOT_WORKER_API_KEY:
        logger.error("❌ BOT_WORKER_API_KEY is not configured; rejecting worker request")
        raise InvalidApiKeyError()
    if not security.verify_bot_api_key(x_api_key, settings.BOT_WORKER_API_KEY):
        raise InvalidApiKeyError()
