from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from fanpage.models.memo import CollaborationMemo, CollaborationMemoComment

class MemoRepository:
    async def list_with_comments(self, db: AsyncSession) -> List[CollaborationMemo]:
        result = await db.execute(
            select(CollaborationMemo)
            .options(selectinload(CollaborationMemo.comments))
            .order_by(CollaborationMemo.created_at.desc())
        )
        return result.scalars().all()

    async def get(self, db: AsyncSession, memo_id: str) -> Optional[CollaborationMemo]:
        result = await db.execute(
            select(CollaborationMemo)
            .options(selectinload(CollaborationMemo.comments))
            .where(CollaborationMemo.id == memo_id)
        )
        return result.scalars().first()

    async def add(self, db: AsyncSession, memo: CollaborationMemo) -> CollaborationMemo:
        db.add(memo)
        await db.flush()
        return memo

    async def add_comment(self, db: AsyncSession, memo_id: str, content: str) -> CollaborationMemoComment:
        comment = CollaborationMemoComment(memo_id=memo_id, content=content)
        db.add(comment)
        await db.flush()
        return comment

    async def remove(self, db: AsyncSession, memo: CollaborationMemo) -> None:
        await db.delete(memo)
        await db.flush()

memo_repo = MemoRepository()
