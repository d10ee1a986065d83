import asyncio
import pytest
import pytest_asyncio
from datetime import date
from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from fanpage.core.database import Base
from fanpage.core.enums import AdminRole
from fanpage.models import PinnedGuestbook, VisitorCount
from fanpage.services import guestbook_service, visitor_service

DAY = date(2024, 5, 15)

@pytest_asyncio.fixture(scope="function")
async def file_session_factory(tmp_path):
    """
    요청마다 별도 커넥션을 쓰는 파일 SQLite.
    (인메모리 StaticPool은 커넥션 하나를 공유하므로 동시 트랜잭션을 재현할 수 없음)
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'concurrent.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()

async def _in_own_session(factory, func, *args):
    async with factory() as session:
        return await func(session, *args)

@pytest.mark.asyncio
async def test_concurrent_first_visits_are_all_counted(file_session_factory):
    results = await asyncio.gather(
        *[_in_own_session(file_session_factory, visitor_service.record_visit, DAY) for _ in range(5)],
        return_exceptions=True,
    )
    assert results == [{"ok": True}] * 5

    async with file_session_factory() as session:
        rows = (await session.execute(select(VisitorCount))).scalars().all()
    assert [(row.date, row.count) for row in rows] == [(DAY, 5)]

@pytest.mark.asyncio
async def test_concurrent_first_pins_converge_on_one_row(file_session_factory):
    results = await asyncio.gather(
        _in_own_session(file_session_factory, guestbook_service.set_pinned, "id-a", AdminRole.ADMIN),
        _in_own_session(file_session_factory, guestbook_service.set_pinned, "id-b", AdminRole.ADMIN),
        return_exceptions=True,
    )
    assert results == ["id-a", "id-b"]

    async with file_session_factory() as session:
        pins = (await session.execute(select(PinnedGuestbook))).scalars().all()
    assert len(pins) == 1
    assert pins[0].guestbook_id in {"id-a", "id-b"}

@pytest.mark.asyncio
async def test_repinning_in_same_session_reads_latest(db_session):
    await guestbook_service.set_pinned(db_session, "first", AdminRole.ADMIN)
    assert await guestbook_service.get_pinned(db_session) == "first"
    await guestbook_service.set_pinned(db_session, "second", AdminRole.ADMIN)
    assert await guestbook_service.get_pinned(db_session) == "second"
