from typing import List, Optional
from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from fanpage.core import constants
from fanpage.core.database import dialect_insert
from fanpage.models.guestbook import GuestbookEntry, PinnedGuestbook
from fanpage.models._helpers import utcnow

# 커밋은 서비스 계층에서 (여러 쓰기를 한 트랜잭션으로 묶기 위함)
class GuestbookRepository:
    async def get(self, db: AsyncSession, entry_id: str) -> Optional[GuestbookEntry]:
        result = await db.execute(select(GuestbookEntry).where(GuestbookEntry.id == entry_id))
        return result.scalars().first()

    async def list_recent(self, db: AsyncSession, *, offset: int, limit: int) -> List[GuestbookEntry]:
        result = await db.execute(
            select(GuestbookEntry)
            .order_by(GuestbookEntry.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return result.scalars().all()

    async def count(self, db: AsyncSession) -> int:
        result = await db.execute(select(func.count()).select_from(GuestbookEntry))
        return result.scalar_one()

    async def get_oldest(self, db: AsyncSession, *, exclude_id: Optional[str] = None) -> Optional[GuestbookEntry]:
        stmt = select(GuestbookEntry).order_by(GuestbookEntry.created_at.asc()).limit(1)
        if exclude_id is not None:
            stmt = stmt.where(GuestbookEntry.id != exclude_id)
        result = await db.execute(stmt)
        return result.scalars().first()

    async def add(self, db: AsyncSession, *, author: str, content: str, user_key: str) -> GuestbookEntry:
        db_obj = GuestbookEntry(author=author, content=content, user_key=user_key)
        db.add(db_obj)
        await db.flush()
        return db_obj

    async def remove(self, db: AsyncSession, entry: GuestbookEntry) -> None:
        await db.delete(entry)
        await db.flush()


class PinnedGuestbookRepository:
    async def get(self, db: AsyncSession) -> Optional[PinnedGuestbook]:
        result = await db.execute(
            select(PinnedGuestbook).where(PinnedGuestbook.id == constants.PINNED_GUESTBOOK_KEY)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def upsert(self, db: AsyncSession, guestbook_id: str) -> None:
        # 동시 첫 고정에도 UNIQUE 충돌 없이 한 행으로 수렴
        now = utcnow()
        stmt = dialect_insert(db, PinnedGuestbook).values(
            id=constants.PINNED_GUESTBOOK_KEY,
            guestbook_id=guestbook_id,
            updated_at=now,
        ).on_conflict_do_update(
            index_elements=["id"],
            set_={"guestbook_id": guestbook_id, "updated_at": now},
        )
        await db.execute(stmt)

    async def remove_for_entry(self, db: AsyncSession, guestbook_id: str) -> int:
        result = await db.execute(
            delete(PinnedGuestbook).where(PinnedGuestbook.guestbook_id == guestbook_id)
        )
        return result.rowcount


guestbook_repo = GuestbookRepository()
pinned_repo = PinnedGuestbookRepository()
