import json
import logging
from datetime import datetime, timezone
from typing import Any, List, Optional
import redis.asyncio as async_redis
from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.core import constants
from fanpage.core.enums import BotMessageType
from fanpage.core.exceptions import BotConfigNotFoundError, InvalidInputError
from fanpage.models.bot import BotConfig, BotChatLog
from fanpage.repository.bot import bot_config_repo, bot_chat_log_repo
from fanpage.schemas.bot import BotChatLogCreate, BotConfigUpsert, BotStatusUpdate
from fanpage.services.common.transaction import transaction

logger = logging.getLogger(__name__)

async def get_config(db: AsyncSession, channel_id: Optional[str]) -> BotConfig:
    if not channel_id:
        raise InvalidInputError("channel_id is required")
    config = await bot_config_repo.get_by_channel(db, channel_id)
    if not config:
        raise BotConfigNotFoundError()
    return config

async def upsert_config(db: AsyncSession, payload: BotConfigUpsert) -> BotConfig:
    """channel_id 기준으로 봇 설정을 생성하거나 덮어씁니다."""
    if not payload.channel_id or not payload.channel_name:
        raise InvalidInputError("channel_id and channel_name are required")

    async with transaction(db, "upsert bot config"):
        config = await bot_config_repo.get_by_channel(db, payload.channel_id)
        if config is None:
            config = await bot_config_repo.add(db, BotConfig(channel_id=payload.channel_id, channel_name=payload.channel_name))
        config.channel_name = payload.channel_name
        config.welcome_message = payload.welcome_message
        config.auto_reply_enabled = True if payload.auto_reply_enabled is None else payload.auto_reply_enabled
        config.moderation_enabled = False if payload.moderation_enabled is None else payload.moderation_enabled
        config.donation_alert_enabled = True if payload.donation_alert_enabled is None else payload.donation_alert_enabled
    return config

async def list_active_configs(db: AsyncSession) -> List[BotConfig]:
    return await bot_config_repo.list_active(db)

async def publish_bot_control(
    redis_client: async_redis.Redis,
    action: str,
    channel_id: str,
    data: Optional[Any] = None,
) -> None:
    """Redis Pub/Sub으로 워커에게 제어 신호를 보냅니다."""
    message = json.dumps({
        "action": action,
        "channelId": channel_id,
        "data": data,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })
    await redis_client.publish(constants.REDIS_CHANNEL_BOT_CONTROL, message)
    logger.info(f"📡 Published bot control: {action} for {channel_id}")

async def set_bot_active(
    db: AsyncSession,
    redis_client: async_redis.Redis,
    channel_id: str,
    is_active: bool,
) -> dict:
    if not channel_id:
        raise InvalidInputError("channel_id is required")

    config = await bot_config_repo.get_by_channel(db, channel_id)
    if not config:
        raise BotConfigNotFoundError()

    now = datetime.now(timezone.utc)
    async with transaction(db, "toggle bot"):
        config.is_active = is_active
        if is_active:
            config.last_connected = now
        else:
            config.last_disconnected = now

    # 상태 저장은 이미 커밋됨: 알림 실패는 로그만 남김
    action = constants.BOT_ACTION_CONNECT if is_active else constants.BOT_ACTION_DISCONNECT
    try:
        await publish_bot_control(redis_client, action, channel_id)
    except Exception as e:
        logger.warning(f"⚠️ Failed to publish bot control ({action} {channel_id}): {e}")

    return {
        "success": True,
        "message": "Bot activated" if is_active else "Bot deactivated",
    }

async def update_worker_status(db: AsyncSession, channel_id: str, payload: BotStatusUpdate) -> dict:
    """
    워커가 보고한 연결 상태를 반영합니다.
    보고된 필드만 갱신하며, 해당 채널이 없어도 성공으로 응답합니다.
    """
    values = {}
    if payload.is_connected is not None:
        values["is_connected"] = payload.is_connected
    if payload.last_connected is not None:
        values["last_connected"] = payload.last_connected
    if payload.last_disconnected is not None:
        values["last_disconnected"] = payload.last_disconnected
    if payload.error_message:
        values["error_message"] = payload.error_message

    if values:
        async with transaction(db, "update bot status"):
            updated = await bot_config_repo.update_status(db, channel_id, values)
        if not updated:
            logger.warning(f"⚠️ Bot status reported for unknown channel {channel_id}")
    return {"success": True}

async def record_chat_log(db: AsyncSession, payload: BotChatLogCreate) -> dict:
    if not payload.config_id or not payload.username or not payload.message or not payload.message_type:
        raise InvalidInputError("config_id, username, message and message_type are required")
    try:
        message_type = BotMessageType(payload.message_type)
    except ValueError:
        raise InvalidInputError(f"Invalid message_type: {payload.message_type}")

    if not await bot_config_repo.get(db, payload.config_id):
        raise BotConfigNotFoundError()

    async with transaction(db, "record chat log"):
        await bot_chat_log_repo.add(db, BotChatLog(
            config_id=payload.config_id,
            username=payload.username,
            message=payload.message,
            message_type=message_type.value,
        ))
    return {"success": True}

async def list_recent_chat_logs(
    db: AsyncSession,
    config_id: Optional[str],
    limit: int,
    message_type: Optional[str] = None,
) -> dict:
    if not config_id:
        raise InvalidInputError("config_id is required")
    logs = await bot_chat_log_repo.list_recent(db, config_id, limit, message_type)
    return {"logs": logs, "count": len(logs)}
