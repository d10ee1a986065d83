from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
import redis.asyncio as async_redis
from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.core.cache import get_redis
from fanpage.core.database import get_db
from fanpage.core.deps import require_admin, verify_bot_worker
from fanpage.core.rate_limit_config import get_rate_limiter
from fanpage.schemas.bot import (
    BotActivateRequest,
    BotActivateResponse,
    BotChatLogCreate,
    BotChatLogList,
    BotConfigDetailResponse,
    BotConfigResponse,
    BotConfigUpsert,
    BotStatusUpdate,
)
from fanpage.services import bot_service

router = APIRouter(prefix="/bot", tags=["bot"])

@router.get(
    "/config",
    response_model=BotConfigDetailResponse,
    dependencies=[Depends(require_admin), Depends(get_rate_limiter("/api/bot/config"))],
)
async def read_bot_config(channel_id: Optional[str] = None, db: AsyncSession = Depends(get_db)):
    return await bot_service.get_config(db, channel_id)

@router.post(
    "/config",
    response_model=BotConfigResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin), Depends(get_rate_limiter("/api/bot/config"))],
)
async def upsert_bot_config(payload: BotConfigUpsert, db: AsyncSession = Depends(get_db)):
    """
    [관리자 권한] 채널별 봇 설정 생성/수정 (channel_id 기준 upsert)
    """
    return await bot_service.upsert_config(db, payload)

@router.post(
    "/activate",
    response_model=BotActivateResponse,
    dependencies=[Depends(require_admin), Depends(get_rate_limiter("/api/bot/activate"))],
)
async def activate_bot(
    payload: BotActivateRequest,
    db: AsyncSession = Depends(get_db),
    redis_client: async_redis.Redis = Depends(get_redis),
):
    """
    [관리자 권한] 봇 활성화/비활성화. 워커에게 Redis(bot:control)로 알립니다.
    """
    return await bot_service.set_bot_active(db, redis_client, payload.channel_id, payload.is_active)

@router.get(
    "/configs/active",
    response_model=List[BotConfigDetailResponse],
    dependencies=[Depends(verify_bot_worker), Depends(get_rate_limiter("/api/bot/configs/active"))],
)
async def list_active_bot_configs(db: AsyncSession = Depends(get_db)):
    """
    [봇 워커 전용] 활성화된 봇 설정 + 활성 명령어 목록 (X-API-Key 필요)
    """
    return await bot_service.list_active_configs(db)

@router.patch(
    "/status/{channel_id}",
    dependencies=[Depends(verify_bot_worker), Depends(get_rate_limiter("/api/bot/status"))],
)
async def update_bot_status(channel_id: str, payload: BotStatusUpdate, db: AsyncSession = Depends(get_db)):
    """
    [봇 워커 전용] 채널 연결 상태 보고 (X-API-Key 필요)
    """
    return await bot_service.update_worker_status(db, channel_id, payload)

@router.post(
    "/chat-logs",
    dependencies=[Depends(verify_bot_worker), Depends(get_rate_limiter("/api/bot/chat-logs"))],
)
async def create_chat_log(payload: BotChatLogCreate, db: AsyncSession = Depends(get_db)):
    """
    [봇 워커 전용] 채팅 로그 수신 (X-API-Key 필요)
    """
    return await bot_service.record_chat_log(db, payload)

@router.get(
    "/chat-logs/recent",
    response_model=BotChatLogList,
    dependencies=[Depends(require_admin), Depends(get_rate_limiter("/api/bot/chat-logs/recent"))],
)
async def recent_chat_logs(
    config_id: Optional[str] = None,
    limit: int = Query(50, ge=1),
    message_type: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    return await bot_service.list_recent_chat_logs(db, config_id, limit, message_type)
