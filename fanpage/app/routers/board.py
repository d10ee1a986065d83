from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.core import constants
from fanpage.core.database import get_db
from fanpage.core.deps import get_current_role
from fanpage.core.enums import AdminRole
from fanpage.core.rate_limit_config import get_rate_limiter
from fanpage.schemas.guestbook import (
    GuestbookCreate,
    GuestbookDeleteRequest,
    GuestbookResponse,
    PinnedGuestbookResponse,
    PinnedGuestbookUpdate,
)
from fanpage.services import guestbook_service

router = APIRouter(prefix="/board", tags=["guestbook"])

@router.get("", response_model=List[GuestbookResponse], dependencies=[Depends(get_rate_limiter("/api/board"))])
async def list_guestbook(
    page: int = Query(1, ge=1),
    limit: int = Query(constants.DEFAULT_PAGE_SIZE, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """
    방명록 목록 (최신순, 페이지네이션)
    """
    return await guestbook_service.list_entries(db, page, limit)

@router.post("", response_model=GuestbookResponse, dependencies=[Depends(get_rate_limiter("/api/board/write"))])
async def create_guestbook(
    payload: GuestbookCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    방명록 등록. 최대 개수를 넘으면 가장 오래된 글이 삭제됩니다.
    """
    return await guestbook_service.create_entry(db, payload.author, payload.content, payload.user_key)

# /{entry_id} 보다 먼저 등록해야 "pinned"가 id로 잡히지 않음
@router.get("/pinned", response_model=PinnedGuestbookResponse, dependencies=[Depends(get_rate_limiter("/api/board/pinned"))])
async def get_pinned_guestbook(db: AsyncSession = Depends(get_db)):
    return PinnedGuestbookResponse(guestbook_id=await guestbook_service.get_pinned(db))

@router.post("/pinned", response_model=PinnedGuestbookResponse, dependencies=[Depends(get_rate_limiter("/api/board/pinned"))])
async def set_pinned_guestbook(
    payload: PinnedGuestbookUpdate,
    role: AdminRole = Depends(get_current_role),
    db: AsyncSession = Depends(get_db),
):
    """
    [관리자 권한] 고정 방명록 지정
    """
    pinned_id = await guestbook_service.set_pinned(db, payload.guestbook_id, role)
    return PinnedGuestbookResponse(guestbook_id=pinned_id)

@router.get("/{entry_id}", response_model=GuestbookResponse, dependencies=[Depends(get_rate_limiter("/api/board/{entry_id}"))])
async def get_guestbook(entry_id: str, db: AsyncSession = Depends(get_db)):
    return await guestbook_service.get_entry(db, entry_id)

@router.delete("/{entry_id}", dependencies=[Depends(get_rate_limiter("/api/board/{entry_id}"))])
async def delete_guestbook(
    entry_id: str,
    payload: Optional[GuestbookDeleteRequest] = Body(default=None),
    role: AdminRole = Depends(get_current_role),
    db: AsyncSession = Depends(get_db),
):
    """
    방명록 삭제: 작성자(user_key 일치) 또는 관리자만 가능.
    """
    user_key = payload.user_key if payload else None
    return await guestbook_service.delete_entry(db, entry_id, user_key, role)
