from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.models.notice import Notice
from fanpage.repository.notice import notice_repo
from fanpage.services.common.transaction import transaction

async def get_notice(db: AsyncSession) -> Notice:
    """공지사항 조회 (행이 없으면 빈 공지로 생성)"""
    async with transaction(db, "load notice"):
        notice = await notice_repo.get_or_create(db)
    return notice

async def update_notice_content(db: AsyncSession, content: str) -> Notice:
    async with transaction(db, "update notice content"):
        notice = await notice_repo.get_or_create(db)
        notice.content = content
    return notice

async def set_notice_visibility(db: AsyncSession, is_visible: bool) -> Notice:
    async with transaction(db, "toggle notice"):
        notice = await notice_repo.get_or_create(db)
        notice.is_visible = is_visible
    return notice
