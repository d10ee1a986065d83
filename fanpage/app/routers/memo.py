from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.core.database import get_db
from fanpage.core.deps import require_role
from fanpage.core.enums import AdminRole
from fanpage.core.rate_limit_config import get_rate_limiter
from fanpage.schemas.memo import (
    MemoCommentCreate,
    MemoCommentResponse,
    MemoCreate,
    MemoResponse,
    MemoStatusUpdate,
)
from fanpage.services import memo_service

# 협업 메모는 관리자와 스탭만 사용
router = APIRouter(
    prefix="/collaboration-memo",
    tags=["collaboration_memo"],
    dependencies=[
        Depends(require_role(AdminRole.ADMIN, AdminRole.STAFF)),
        Depends(get_rate_limiter("/api/collaboration-memo")),
    ],
)

@router.get("", response_model=List[MemoResponse])
async def list_memos(db: AsyncSession = Depends(get_db)):
    return await memo_service.list_memos(db)

@router.post("", response_model=MemoResponse)
async def create_memo(payload: MemoCreate, db: AsyncSession = Depends(get_db)):
    return await memo_service.create_memo(db, payload.target, payload.content)

@router.put("/{memo_id}", response_model=MemoResponse)
async def update_memo(memo_id: str, payload: MemoCreate, db: AsyncSession = Depends(get_db)):
    return await memo_service.update_memo(db, memo_id, payload.target, payload.content)

@router.patch("/{memo_id}", response_model=MemoResponse)
async def change_memo_status(memo_id: str, payload: MemoStatusUpdate, db: AsyncSession = Depends(get_db)):
    """
    메모 상태 변경 (pending / approved / rejected), 색상은 상태에 따라 결정
    """
    return await memo_service.change_status(db, memo_id, payload.status)

@router.delete("/{memo_id}")
async def delete_memo(memo_id: str, db: AsyncSession = Depends(get_db)):
    return await memo_service.delete_memo(db, memo_id)

@router.post("/{memo_id}/comments", response_model=MemoCommentResponse)
async def add_memo_comment(memo_id: str, payload: MemoCommentCreate, db: AsyncSession = Depends(get_db)):
    return await memo_service.add_comment(db, memo_id, payload.content)
