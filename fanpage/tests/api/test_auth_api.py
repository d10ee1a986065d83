import pytest
from httpx import AsyncClient
from fanpage.core.config import settings
from fanpage.tests.conftest import ADMIN_PASSWORD, STAFF_PASSWORD, VISITOR_PASSWORD, role_cookie

ROLE_STRINGS = {"admin", "staff", "visitor", "guest"}

@pytest.mark.asyncio
@pytest.mark.parametrize(
    "password, expected_role",
    [(ADMIN_PASSWORD, "admin"), (STAFF_PASSWORD, "staff"), (VISITOR_PASSWORD, "visitor")],
)
async def test_login_sets_role_cookie(client: AsyncClient, password, expected_role):
    response = await client.post("/api/login", json={"password": password})
    assert response.status_code == 200
    assert response.json() == {"ok": True, "role": expected_role}

    # 쿠키 값은 고정된 등급 문자열 중 하나
    assert response.cookies.get("admin_session") == expected_role
    assert response.cookies.get("admin_session") in ROLE_STRINGS

    set_cookie = response.headers["set-cookie"].lower()
    assert "httponly" in set_cookie
    assert "path=/" in set_cookie
    assert "samesite=lax" in set_cookie
    assert "max-age" not in set_cookie
    assert "expires" not in set_cookie

@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["wrong", "", "ADMIN-PASS", ADMIN_PASSWORD + " "])
async def test_login_wrong_password_sets_no_cookie(client: AsyncClient, password):
    response = await client.post("/api/login", json={"password": password})
    assert response.status_code == 401
    assert response.json()["detail"] == "Access denied"
    assert "set-cookie" not in response.headers

@pytest.mark.asyncio
async def test_disabled_role_password_never_matches(client: AsyncClient, monkeypatch):
    # 빈 비밀번호 설정 = 해당 등급 로그인 비활성화
    monkeypatch.setattr(settings, "STAFF_PASSWORD", "")
    response = await client.post("/api/login", json={"password": ""})
    assert response.status_code == 401

    response = await client.post("/api/login", json={"password": STAFF_PASSWORD})
    assert response.status_code == 401

@pytest.mark.asyncio
async def test_login_without_any_configured_password(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "")
    monkeypatch.setattr(settings, "STAFF_PASSWORD", "")
    monkeypatch.setattr(settings, "VISITOR_PASSWORD", "")
    response = await client.post("/api/login", json={"password": "anything"})
    assert response.status_code == 500
    assert "set-cookie" not in response.headers

@pytest.mark.asyncio
async def test_logout_clears_cookie_and_is_idempotent(client: AsyncClient):
    for _ in range(2):
        response = await client.delete("/api/login")
        assert response.status_code == 200
        assert response.json() == {"ok": True}
        set_cookie = response.headers["set-cookie"].lower()
        assert set_cookie.startswith('admin_session=""') or set_cookie.startswith("admin_session=;")
        assert "max-age=0" in set_cookie

@pytest.mark.asyncio
@pytest.mark.parametrize(
    "cookie, expected_role",
    [("admin", "admin"), ("staff", "staff"), ("visitor", "visitor"), ("guest", "guest"),
     ("1", "guest"), ("ADMIN", "guest"), ("root", "guest")],
)
async def test_auth_status_resolves_cookie(client: AsyncClient, cookie, expected_role):
    response = await client.get("/api/auth", headers=role_cookie(cookie))
    assert response.status_code == 200
    assert response.json() == {"role": expected_role, "is_admin": expected_role == "admin"}

@pytest.mark.asyncio
async def test_auth_status_without_cookie_is_guest(client: AsyncClient):
    response = await client.get("/api/auth")
    assert response.json() == {"role": "guest", "is_admin": False}

@pytest.mark.asyncio
async def test_login_cookie_is_used_by_following_requests(client: AsyncClient):
    await client.post("/api/login", json={"password": ADMIN_PASSWORD})
    response = await client.get("/api/auth")
    assert response.json()["role"] == "admin"

    await client.delete("/api/login")
    response = await client.get("/api/auth")
    assert response.json()["role"] == "guest"
