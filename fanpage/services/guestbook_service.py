import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.core import security
from fanpage.core.config import settings
from fanpage.core.enums import AdminRole
from fanpage.core.exceptions import (
    GuestbookEntryNotFoundError,
    InvalidInputError,
    PermissionDeniedError,
)
from fanpage.models.guestbook import GuestbookEntry
from fanpage.repository.guestbook import guestbook_repo, pinned_repo
from fanpage.services.common.transaction import transaction

logger = logging.getLogger(__name__)

async def list_entries(db: AsyncSession, page: int, limit: int) -> List[GuestbookEntry]:
    """
    최신순 방명록 목록. offset = (page - 1) * limit
    """
    offset = (page - 1) * limit
    return await guestbook_repo.list_recent(db, offset=offset, limit=limit)

async def get_entry(db: AsyncSession, entry_id: str) -> GuestbookEntry:
    entry = await guestbook_repo.get(db, entry_id)
    if not entry:
        raise GuestbookEntryNotFoundError()
    return entry

async def create_entry(db: AsyncSession, author: str, content: str, user_key: str) -> GuestbookEntry:
    """
    방명록을 등록합니다.
    등록과 용량 초과분(가장 오래된 글 1개) 삭제를 한 트랜잭션에서 처리합니다.
    """
    if not author or not content or not user_key:
        raise InvalidInputError("author, content and user_key are required")

    async with transaction(db, "create guestbook entry"):
        entry = await guestbook_repo.add(db, author=author, content=content, user_key=user_key)
        if await guestbook_repo.count(db) > settings.GUESTBOOK_MAX_ENTRIES:
            oldest = await guestbook_repo.get_oldest(db, exclude_id=entry.id)
            if oldest is not None:
                await pinned_repo.remove_for_entry(db, oldest.id)
                await guestbook_repo.remove(db, oldest)
                logger.info(f"🧹 Guestbook capacity reached, evicted oldest entry {oldest.id}")
    return entry

async def delete_entry(
    db: AsyncSession,
    entry_id: str,
    requester_user_key: Optional[str],
    role: AdminRole,
) -> dict:
    entry = await guestbook_repo.get(db, entry_id)
    if not entry:
        raise GuestbookEntryNotFoundError()

    is_admin = security.authorize(role, AdminRole.ADMIN)
    if not is_admin and entry.user_key != requester_user_key:
        raise PermissionDeniedError()

    # 고정글 해제 + 글 삭제: 둘 다 성공하거나 둘 다 실패
    async with transaction(db, "delete guestbook entry"):
        await pinned_repo.remove_for_entry(db, entry.id)
        await guestbook_repo.remove(db, entry)
    return {"ok": True}

async def get_pinned(db: AsyncSession) -> Optional[str]:
    pin = await pinned_repo.get(db)
    if pin is None:
        return None
    return pin.guestbook_id

async def set_pinned(db: AsyncSession, guestbook_id: Optional[str], role: AdminRole) -> Optional[str]:
    """
    고정글 지정 (관리자 전용, 싱글톤 행 upsert).
    대상 글 존재 여부는 확인하지 않습니다.
    """
    if not security.authorize(role, AdminRole.ADMIN):
        raise PermissionDeniedError()
    if not guestbook_id:
        raise InvalidInputError("guestbook_id is required")

    async with transaction(db, "set pinned guestbook"):
        await pinned_repo.upsert(db, guestbook_id)
    return guestbook_id
