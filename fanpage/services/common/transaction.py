import logging
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

@asynccontextmanager
async def transaction(db: AsyncSession, action: str):
    """
    블록 안의 쓰기를 하나의 트랜잭션으로 커밋합니다.
    블록 또는 커밋이 실패하면 전체를 롤백합니다. (DB 에러는 PersistenceError로 변환)
    """
    try:
        yield db
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"❌ {action} failed, rolled back: {e}")
        raise PersistenceError()
    except Exception:
        await db.rollback()
        raise
