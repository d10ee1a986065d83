# fanpage/core/database.py
import asyncio
import logging
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy import text
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from fanpage.core.config import settings

# 로거 설정
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# 1. 비동기 엔진 생성
# echo=True로 설정하면 실행되는 SQL이 로그에 찍힙니다. (디버깅용)
engine = create_async_engine(
    settings.ASYNC_DATABASE_URL,
    echo=False,
    future=True,
    pool_pre_ping=True # 연결 끊김 자동 감지
)

# 2. 비동기 세션 공장 (Async Session Factory)
# expire_on_commit=False: 커밋 후에도 객체 속성에 접근할 수 있도록 설정
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False
)

# 3. 모델들이 상속받을 기본 클래스
Base = declarative_base()

# 4. 의존성 주입용 함수 (요청마다 독립된 세션)
async def get_db():
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()

# 5. DB 연결 대기 함수 (초기 구동 시 사용)
async def wait_for_db(retries: int = 30, delay: int = 2):
    """데이터베이스가 준비될 때까지 대기합니다."""
    logger.info(f"⏳ Waiting for database... (Max retries: {retries})")

    for i in range(retries):
        try:
            async with engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("✅ Database is ready!")
            return
        except Exception as e:
            if i == retries - 1:
                logger.error(f"❌ Database connection failed after {retries} attempts: {e}")
                raise e

            logger.warning(f"⚠️ Database not ready yet. Retrying in {delay}s... ({i+1}/{retries})")
            await asyncio.sleep(delay)

# 6. 테이블 생성 (개발/단일 인스턴스 배포용)
async def create_all_tables():
    # 모델 모듈을 import 해야 Base.metadata에 테이블이 등록됨
    import fanpage.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("✅ Tables are ready")

# 7. 원자적 upsert용 INSERT (ON CONFLICT DO UPDATE)
def dialect_insert(db: AsyncSession, model):
    """
    현재 세션의 DB 방언에 맞는 insert()를 반환합니다.
    운영은 PostgreSQL, 테스트는 SQLite (둘 다 on_conflict_do_update 지원)
    """
    if db.get_bind().dialect.name == "sqlite":
        return sqlite_insert(model)
    return pg_insert(model)
