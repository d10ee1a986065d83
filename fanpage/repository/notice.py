from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from fanpage.core import constants
from fanpage.models.notice import Notice

class NoticeRepository:
    async def get(self, db: AsyncSession) -> Optional[Notice]:
        result = await db.execute(select(Notice).where(Notice.id == constants.NOTICE_ID))
        return result.scalars().first()

    async def get_or_create(self, db: AsyncSession) -> Notice:
        notice = await self.get(db)
        if notice is None:
            notice = Notice(id=constants.NOTICE_ID, content="", is_visible=True)
            db.add(notice)
            await db.flush()
        return notice

notice_repo = NoticeRepository()
