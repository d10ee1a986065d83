import pytest
from httpx import AsyncClient
from fanpage.tests.conftest import role_cookie

@pytest.mark.asyncio
async def test_notice_is_created_on_first_read(client: AsyncClient):
    response = await client.get("/api/notice")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["content"] == ""
    assert data["is_visible"] is True

@pytest.mark.asyncio
async def test_admin_updates_and_toggles_notice(client: AsyncClient):
    response = await client.put("/api/notice", json={"content": "오늘 방송 휴방"}, headers=role_cookie("admin"))
    assert response.status_code == 200
    assert response.json()["content"] == "오늘 방송 휴방"

    response = await client.patch("/api/notice", json={"is_visible": False}, headers=role_cookie("admin"))
    assert response.status_code == 200
    assert response.json()["is_visible"] is False

    data = (await client.get("/api/notice")).json()
    assert data["content"] == "오늘 방송 휴방"
    assert data["is_visible"] is False

@pytest.mark.asyncio
@pytest.mark.parametrize("role", [None, "guest", "visitor", "staff"])
async def test_non_admin_cannot_modify_notice(client: AsyncClient, role):
    headers = role_cookie(role) if role else None
    response = await client.put("/api/notice", json={"content": "hacked"}, headers=headers)
    assert response.status_code == 403
    response = await client.patch("/api/notice", json={"is_visible": False}, headers=headers)
    assert response.status_code == 403

    data = (await client.get("/api/notice")).json()
    assert data["content"] == ""
    assert data["is_visible"] is True
