from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.core.database import get_db
from fanpage.core.deps import get_current_role
from fanpage.core.enums import AdminRole
from fanpage.core.rate_limit_config import get_rate_limiter
from fanpage.schemas.visitor import PublicVisitorStats
from fanpage.services import visitor_service

router = APIRouter(prefix="/visitor", tags=["visitor"])

@router.post("", dependencies=[Depends(get_rate_limiter("/api/visitor"))])
async def record_visit(db: AsyncSession = Depends(get_db)):
    return await visitor_service.record_visit(db)

@router.get("", dependencies=[Depends(get_rate_limiter("/api/visitor/stats"))])
async def visitor_stats(
    date: Optional[str] = None,
    role: AdminRole = Depends(get_current_role),
    db: AsyncSession = Depends(get_db),
):
    """
    방문 통계. 관리자가 아니면 0으로 채운 기본값을 반환합니다.
    date=YYYY-MM-DD 지정 시 해당 날짜 방문자 수.
    """
    if role != AdminRole.ADMIN:
        return PublicVisitorStats()
    if date:
        return await visitor_service.get_count_for_date(db, date)
    return await visitor_service.get_stats(db)
