import sys
from pathlib import Path

# Ensure project root is on sys.path so `import fanpage` works
ROOT = str(Path(__file__).resolve().parents[2])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest
import pytest_asyncio
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

from fanpage.core.database import Base, get_db
from fanpage.core.cache import get_redis
from fanpage.core.config import settings
from fanpage.app.main import app
from fanpage.models import GuestbookEntry

SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_PASSWORD = "admin-pass"
STAFF_PASSWORD = "staff-pass"
VISITOR_PASSWORD = "visitor-pass"
BOT_WORKER_API_KEY = "worker-key-1234"


def role_cookie(role: str) -> dict:
    """요청 헤더로 세션 쿠키를 직접 지정 (쿠키 jar와 무관)"""
    return {"Cookie": f"admin_session={role}"}


# 1. 설정 고정 (비밀번호 / API Key)
@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "test")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setattr(settings, "STAFF_PASSWORD", STAFF_PASSWORD)
    monkeypatch.setattr(settings, "VISITOR_PASSWORD", VISITOR_PASSWORD)
    monkeypatch.setattr(settings, "BOT_WORKER_API_KEY", BOT_WORKER_API_KEY)
    monkeypatch.setattr(settings, "GUESTBOOK_MAX_ENTRIES", 1000)
    monkeypatch.setattr(settings, "RATE_LIMIT_ENABLED", False)
    monkeypatch.setattr(settings, "NTFY_ENABLED", False)
    return settings


# 2. DB Fixture (Async) - 테스트마다 새 인메모리 DB
@pytest_asyncio.fixture(scope="function")
async def db_engine():
    engine = create_async_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()

@pytest.fixture(scope="function")
def session_factory(db_engine):
    return async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False
    )

@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


# 3. Redis Mocking (봇 제어 Pub/Sub)
@pytest.fixture(scope="function")
def mock_redis():
    redis_mock = AsyncMock()
    redis_mock.publish.return_value = 1
    return redis_mock


# 4. Client Fixture (AsyncClient)
@pytest_asyncio.fixture(scope="function")
async def client(session_factory, mock_redis):
    """
    httpx.AsyncClient를 사용하여 비동기 API 테스트.
    실제 서비스처럼 요청마다 새 세션을 사용합니다.
    """
    async def override_get_db():
        async with session_factory() as session:
            yield session

    async def override_get_redis():
        return mock_redis

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis] = override_get_redis

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


# 5. 방명록 데이터 Fixture
@pytest.fixture(scope="function")
def seed_guestbook(session_factory):
    """
    created_at을 1초 간격으로 지정해 방명록을 채웁니다. (index 0이 가장 오래됨)
    """
    async def _seed(count: int, base: datetime = None, user_key: str = "seed-key") -> list[str]:
        base = base or datetime(2024, 1, 1, tzinfo=timezone.utc)
        entries = [
            GuestbookEntry(
                author=f"author-{i}",
                content=f"content-{i}",
                user_key=user_key,
                created_at=base + timedelta(seconds=i),
            )
            for i in range(count)
        ]
        async with session_factory() as session:
            session.add_all(entries)
            await session.commit()
        return [entry.id for entry in entries]
    return _seed
