import pytest
from unittest.mock import patch, AsyncMock
from sqlalchemy import select, func
from sqlalchemy.exc import OperationalError

from fanpage.core.config import settings
from fanpage.core.enums import AdminRole
from fanpage.core.exceptions import (
    GuestbookEntryNotFoundError,
    InvalidInputError,
    PermissionDeniedError,
    PersistenceError,
)
from fanpage.models import GuestbookEntry, PinnedGuestbook
from fanpage.repository.guestbook import guestbook_repo
from fanpage.services import guestbook_service


async def _count(session_factory) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(GuestbookEntry))).scalar_one()


@pytest.mark.asyncio
async def test_1001st_entry_evicts_single_oldest(db_session, session_factory, seed_guestbook):
    ids = await seed_guestbook(1000)

    new_entry = await guestbook_service.create_entry(db_session, "fan", "1001번째", "new-key")

    assert await _count(session_factory) == 1000
    async with session_factory() as session:
        remaining = set((await session.execute(select(GuestbookEntry.id))).scalars().all())
    assert ids[0] not in remaining
    assert set(ids[1:]) <= remaining
    assert new_entry.id in remaining

@pytest.mark.asyncio
async def test_sequential_inserts_across_default_cap(db_session, session_factory, seed_guestbook):
    assert settings.GUESTBOOK_MAX_ENTRIES == 1000
    ids = await seed_guestbook(997)

    created = []
    for i in range(5):
        entry = await guestbook_service.create_entry(db_session, "fan", f"msg-{i}", "k")
        created.append(entry.id)
        assert await _count(session_factory) == min(998 + i, 1000)

    async with session_factory() as session:
        remaining = set((await session.execute(select(GuestbookEntry.id))).scalars().all())
    # 998, 999, 1000번째는 삭제 없음 / 1001, 1002번째에서 하나씩 삭제
    assert remaining.isdisjoint(ids[:2])
    assert set(ids[2:]) <= remaining
    assert set(created) <= remaining

@pytest.mark.asyncio
async def test_sequential_inserts_keep_the_cap(db_session, session_factory, seed_guestbook, monkeypatch):
    monkeypatch.setattr(settings, "GUESTBOOK_MAX_ENTRIES", 5)
    ids = await seed_guestbook(5)

    for i in range(3):
        await guestbook_service.create_entry(db_session, "fan", f"extra-{i}", "k")

    assert await _count(session_factory) == 5
    async with session_factory() as session:
        remaining = set((await session.execute(select(GuestbookEntry.id))).scalars().all())
    # 한 번에 하나씩, 가장 오래된 순서대로 삭제
    assert remaining.isdisjoint(ids[:3])
    assert set(ids[3:]) <= remaining

@pytest.mark.asyncio
async def test_no_eviction_below_cap(db_session, session_factory, seed_guestbook):
    await seed_guestbook(10)
    await guestbook_service.create_entry(db_session, "fan", "hi", "k")
    assert await _count(session_factory) == 11

@pytest.mark.asyncio
async def test_evicting_pinned_entry_clears_pin(db_session, session_factory, seed_guestbook, monkeypatch):
    monkeypatch.setattr(settings, "GUESTBOOK_MAX_ENTRIES", 3)
    ids = await seed_guestbook(3)
    await guestbook_service.set_pinned(db_session, ids[0], AdminRole.ADMIN)

    await guestbook_service.create_entry(db_session, "fan", "hi", "k")

    assert await guestbook_service.get_pinned(db_session) is None

@pytest.mark.asyncio
async def test_create_rejects_empty_fields(db_session, session_factory):
    with pytest.raises(InvalidInputError):
        await guestbook_service.create_entry(db_session, "fan", "", "k")
    assert await _count(session_factory) == 0

@pytest.mark.asyncio
async def test_list_offsets_by_page(db_session, seed_guestbook):
    ids = await seed_guestbook(25)
    page = await guestbook_service.list_entries(db_session, page=2, limit=10)
    assert [entry.id for entry in page] == list(reversed(ids))[10:20]

@pytest.mark.asyncio
@pytest.mark.parametrize("role", [AdminRole.GUEST, AdminRole.VISITOR, AdminRole.STAFF])
async def test_delete_ownership_check(db_session, seed_guestbook, role):
    ids = await seed_guestbook(1, user_key="owner")

    with pytest.raises(PermissionDeniedError):
        await guestbook_service.delete_entry(db_session, ids[0], "intruder", role)

    assert await guestbook_service.delete_entry(db_session, ids[0], "owner", role) == {"ok": True}

@pytest.mark.asyncio
async def test_admin_delete_ignores_user_key(db_session, seed_guestbook):
    ids = await seed_guestbook(1, user_key="owner")
    assert await guestbook_service.delete_entry(db_session, ids[0], None, AdminRole.ADMIN) == {"ok": True}
    with pytest.raises(GuestbookEntryNotFoundError):
        await guestbook_service.get_entry(db_session, ids[0])

@pytest.mark.asyncio
async def test_delete_missing_entry(db_session):
    with pytest.raises(GuestbookEntryNotFoundError):
        await guestbook_service.delete_entry(db_session, "missing", "k", AdminRole.ADMIN)

@pytest.mark.asyncio
async def test_delete_is_atomic_with_pin_removal(db_session, session_factory, seed_guestbook):
    ids = await seed_guestbook(1, user_key="owner")
    await guestbook_service.set_pinned(db_session, ids[0], AdminRole.ADMIN)

    failing_remove = AsyncMock(side_effect=OperationalError("DELETE", {}, Exception("disk I/O error")))
    with patch.object(guestbook_repo, "remove", failing_remove):
        with pytest.raises(PersistenceError):
            await guestbook_service.delete_entry(db_session, ids[0], "owner", AdminRole.GUEST)

    # 글 삭제가 실패하면 고정 해제도 롤백
    async with session_factory() as session:
        pin = (await session.execute(select(PinnedGuestbook))).scalars().first()
        assert pin is not None and pin.guestbook_id == ids[0]
    assert await _count(session_factory) == 1

@pytest.mark.asyncio
async def test_get_pinned_without_row(db_session):
    assert await guestbook_service.get_pinned(db_session) is None

@pytest.mark.asyncio
@pytest.mark.parametrize("role", [AdminRole.GUEST, AdminRole.VISITOR, AdminRole.STAFF])
async def test_set_pinned_forbidden_keeps_value(db_session, seed_guestbook, role):
    ids = await seed_guestbook(2)
    await guestbook_service.set_pinned(db_session, ids[0], AdminRole.ADMIN)

    with pytest.raises(PermissionDeniedError):
        await guestbook_service.set_pinned(db_session, ids[1], role)
    assert await guestbook_service.get_pinned(db_session) == ids[0]

@pytest.mark.asyncio
async def test_set_pinned_requires_id(db_session):
    with pytest.raises(InvalidInputError):
        await guestbook_service.set_pinned(db_session, "", AdminRole.ADMIN)
    with pytest.raises(InvalidInputError):
        await guestbook_service.set_pinned(db_session, None, AdminRole.ADMIN)
