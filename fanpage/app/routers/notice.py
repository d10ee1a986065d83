from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.core.database import get_db
from fanpage.core.deps import require_admin
from fanpage.core.rate_limit_config import get_rate_limiter
from fanpage.schemas.notice import NoticeResponse, NoticeContentUpdate, NoticeVisibilityUpdate
from fanpage.services import notice_service

router = APIRouter(prefix="/notice", tags=["notice"])

@router.get("", response_model=NoticeResponse, dependencies=[Depends(get_rate_limiter("/api/notice"))])
async def read_notice(db: AsyncSession = Depends(get_db)):
    return await notice_service.get_notice(db)

@router.put("", response_model=NoticeResponse, dependencies=[Depends(require_admin)])
async def update_notice(payload: NoticeContentUpdate, db: AsyncSession = Depends(get_db)):
    """
    [관리자 권한] 공지사항 내용 수정
    """
    return await notice_service.update_notice_content(db, payload.content)

@router.patch("", response_model=NoticeResponse, dependencies=[Depends(require_admin)])
async def toggle_notice(payload: NoticeVisibilityUpdate, db: AsyncSession = Depends(get_db)):
    """
    [관리자 권한] 공지사항 ON/OFF
    """
    return await notice_service.set_notice_visibility(db, payload.is_visible)
