from datetime import date
from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from fanpage.core.database import dialect_insert
from fanpage.models.visitor import VisitorCount

class VisitorRepository:
    async def increment(self, db: AsyncSession, day: date) -> None:
        """해당 날짜 카운트 +1 (행이 없으면 1로 생성, 원자적)"""
        stmt = dialect_insert(db, VisitorCount).values(date=day, count=1)
        stmt = stmt.on_conflict_do_update(
            index_elements=["date"],
            set_={"count": VisitorCount.count + 1},
        )
        await db.execute(stmt)

    async def sum_between(self, db: AsyncSession, start: date, end: Optional[date] = None) -> int:
        stmt = select(func.coalesce(func.sum(VisitorCount.count), 0)).where(VisitorCount.date >= start)
        if end is not None:
            stmt = stmt.where(VisitorCount.date <= end)
        result = await db.execute(stmt)
        return int(result.scalar_one())

    async def totals(self, db: AsyncSession) -> tuple[int, int]:
        """(전체 방문자 합계, 집계된 일수)"""
        result = await db.execute(
            select(func.coalesce(func.sum(VisitorCount.count), 0), func.count(VisitorCount.id))
        )
        total, days = result.one()
        return int(total), int(days)

visitor_repo = VisitorRepository()
