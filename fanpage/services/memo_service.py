from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.core.enums import MemoStatus, MemoColor
from fanpage.core.exceptions import InvalidInputError, MemoNotFoundError
from fanpage.models.memo import CollaborationMemo, CollaborationMemoComment
from fanpage.repository.memo import memo_repo
from fanpage.services.common.transaction import transaction

# 상태별 메모 색상
STATUS_COLORS = {
    MemoStatus.PENDING: MemoColor.YELLOW,
    MemoStatus.APPROVED: MemoColor.GREEN,
    MemoStatus.REJECTED: MemoColor.RED,
}

async def _get_or_404(db: AsyncSession, memo_id: str) -> CollaborationMemo:
    memo = await memo_repo.get(db, memo_id)
    if not memo:
        raise MemoNotFoundError()
    return memo

def _require_target_and_content(target: str, content: str) -> None:
    if not target or not content:
        raise InvalidInputError("target and content are required")

async def list_memos(db: AsyncSession) -> List[CollaborationMemo]:
    return await memo_repo.list_with_comments(db)

async def create_memo(db: AsyncSession, target: str, content: str) -> CollaborationMemo:
    _require_target_and_content(target, content)
    memo = CollaborationMemo(
        target=target,
        content=content,
        status=MemoStatus.PENDING.value,
        color=MemoColor.YELLOW.value,
        comments=[],
    )
    async with transaction(db, "create memo"):
        await memo_repo.add(db, memo)
    return memo

async def update_memo(db: AsyncSession, memo_id: str, target: str, content: str) -> CollaborationMemo:
    _require_target_and_content(target, content)
    memo = await _get_or_404(db, memo_id)
    async with transaction(db, "update memo"):
        memo.target = target
        memo.content = content
    return memo

async def change_status(db: AsyncSession, memo_id: str, status: str) -> CollaborationMemo:
    try:
        new_status = MemoStatus(status)
    except ValueError:
        raise InvalidInputError(f"Invalid status: {status}")

    memo = await _get_or_404(db, memo_id)
    async with transaction(db, "change memo status"):
        memo.status = new_status.value
        memo.color = STATUS_COLORS[new_status].value
    return memo

async def delete_memo(db: AsyncSession, memo_id: str) -> dict:
    memo = await _get_or_404(db, memo_id)
    async with transaction(db, "delete memo"):
        await memo_repo.remove(db, memo)
    return {"success": True}

async def add_comment(db: AsyncSession, memo_id: str, content: str) -> CollaborationMemoComment:
    if not content:
        raise InvalidInputError("content is required")
    await _get_or_404(db, memo_id)
    async with transaction(db, "add memo comment"):
        comment = await memo_repo.add_comment(db, memo_id, content)
    return comment
