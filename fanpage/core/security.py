import hmac
from typing import Optional

from fanpage.core.config import settings
from fanpage.core.enums import AdminRole

# 쿠키 값으로 발급될 수 있는 등급 문자열 -> 등급
_ROLE_BY_COOKIE = {role.value: role for role in AdminRole}


def resolve_role(cookie_value: Optional[str]) -> AdminRole:
    """
    세션 쿠키 값에서 등급을 결정합니다.
    쿠키가 없거나 알 수 없는 값이면 GUEST 입니다. 서명/만료 검증은 없으며
    쿠키 값은 로그인 시 서버가 발급한 등급 문자열 그대로입니다.
    """
    if not cookie_value:
        return AdminRole.GUEST
    return _ROLE_BY_COOKIE.get(cookie_value, AdminRole.GUEST)


def configured_role_passwords() -> list[tuple[AdminRole, str]]:
    # 우선순위: admin > staff > visitor (같은 비밀번호가 겹치면 높은 등급)
    candidates = [
        (AdminRole.ADMIN, settings.ADMIN_PASSWORD),
        (AdminRole.STAFF, settings.STAFF_PASSWORD),
        (AdminRole.VISITOR, settings.VISITOR_PASSWORD),
    ]
    return [(role, secret) for role, secret in candidates if secret]


def verify_admin_password(password: str, secrets: list[tuple[AdminRole, str]]) -> Optional[AdminRole]:
    """Return the role whose secret matches `password`, or None."""
    if not password:
        return None
    for role, secret in secrets:
        if hmac.compare_digest(password.encode("utf-8"), secret.encode("utf-8")):
            return role
    return None


def authorize(role: AdminRole, *required: AdminRole) -> bool:
    # 계층 없음: STAFF가 ADMIN 권한을 상속하지 않는다
    return role in required


def verify_bot_api_key(presented: Optional[str], expected: str) -> bool:
    if not expected or not presented:
        return False
    return hmac.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))
