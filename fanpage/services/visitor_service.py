from datetime import date, datetime, timedelta
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.core.exceptions import InvalidInputError
from fanpage.repository.visitor import visitor_repo
from fanpage.schemas.visitor import VisitorStats, VisitorDateCount
from fanpage.services.common.transaction import transaction

def _today() -> date:
    # 서버 로컬 날짜 기준
    return datetime.now().date()

async def record_visit(db: AsyncSession, today: Optional[date] = None) -> dict:
    """오늘 방문자 카운트 +1 (행이 없으면 생성)"""
    day = today or _today()
    async with transaction(db, "record visit"):
        await visitor_repo.increment(db, day)
    return {"ok": True}

async def get_stats(db: AsyncSession, today: Optional[date] = None) -> VisitorStats:
    """
    관리자용 방문 통계.
    - week: 이번 주 일요일부터
    - month: 이번 달 1일부터
    - avg: 전체 합계 / 집계된 일수
    """
    day = today or _today()
    yesterday = day - timedelta(days=1)
    # date.weekday(): 월=0 ... 일=6
    week_start = day - timedelta(days=(day.weekday() + 1) % 7)
    month_start = day.replace(day=1)

    total, days = await visitor_repo.totals(db)
    return VisitorStats(
        today=await visitor_repo.sum_between(db, day, day),
        yesterday=await visitor_repo.sum_between(db, yesterday, yesterday),
        week=await visitor_repo.sum_between(db, week_start),
        month=await visitor_repo.sum_between(db, month_start),
        total=total,
        avg=int(total / days + 0.5) if days else 0, # 반올림 (half-up)
    )

async def get_count_for_date(db: AsyncSession, raw_date: str) -> VisitorDateCount:
    try:
        day = date.fromisoformat(raw_date)
    except ValueError:
        raise InvalidInputError("date must be YYYY-MM-DD")
    count = await visitor_repo.sum_between(db, day, day)
    return VisitorDateCount(date=raw_date, count=count)
