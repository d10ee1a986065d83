from typing import List, Optional
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from fanpage.models.bot import BotConfig, BotCommand, BotChatLog

class BotConfigRepository:
    async def get(self, db: AsyncSession, config_id: str) -> Optional[BotConfig]:
        result = await db.execute(select(BotConfig).where(BotConfig.id == config_id))
        return result.scalars().first()

    async def get_by_channel(self, db: AsyncSession, channel_id: str) -> Optional[BotConfig]:
        result = await db.execute(
            select(BotConfig)
            .options(selectinload(BotConfig.commands))
            .where(BotConfig.channel_id == channel_id)
        )
        return result.scalars().first()

    async def list_active(self, db: AsyncSession) -> List[BotConfig]:
        # 워커용: 활성 설정 + 활성 명령어만
        result = await db.execute(
            select(BotConfig)
            .options(selectinload(BotConfig.commands.and_(BotCommand.is_active == True)))
            .where(BotConfig.is_active == True)
            .order_by(BotConfig.created_at.asc())
        )
        return result.scalars().all()

    async def add(self, db: AsyncSession, config: BotConfig) -> BotConfig:
        db.add(config)
        await db.flush()
        return config

    async def update_status(self, db: AsyncSession, channel_id: str, values: dict) -> int:
        result = await db.execute(
            update(BotConfig).where(BotConfig.channel_id == channel_id).values(**values)
        )
        return result.rowcount


class BotCommandRepository:
    async def get(self, db: AsyncSession, command_id: str) -> Optional[BotCommand]:
        result = await db.execute(select(BotCommand).where(BotCommand.id == command_id))
        return result.scalars().first()

    async def list_for_config(self, db: AsyncSession, config_id: str) -> List[BotCommand]:
        result = await db.execute(
            select(BotCommand)
            .where(BotCommand.config_id == config_id)
            .order_by(BotCommand.created_at.desc())
        )
        return result.scalars().all()

    async def find_by_trigger(self, db: AsyncSession, config_id: str, trigger: str) -> Optional[BotCommand]:
        result = await db.execute(
            select(BotCommand).where(BotCommand.config_id == config_id, BotCommand.trigger == trigger)
        )
        return result.scalars().first()

    async def add(self, db: AsyncSession, command: BotCommand) -> BotCommand:
        db.add(command)
        await db.flush()
        return command

    async def remove(self, db: AsyncSession, command: BotCommand) -> None:
        await db.delete(command)
        await db.flush()


class BotChatLogRepository:
    async def add(self, db: AsyncSession, log: BotChatLog) -> BotChatLog:
        db.add(log)
        await db.flush()
        return log

    async def list_recent(
        self,
        db: AsyncSession,
        config_id: str,
        limit: int,
        message_type: Optional[str] = None,
    ) -> List[BotChatLog]:
        stmt = select(BotChatLog).where(BotChatLog.config_id == config_id)
        if message_type:
            stmt = stmt.where(BotChatLog.message_type == message_type)
        result = await db.execute(stmt.order_by(BotChatLog.timestamp.desc()).limit(limit))
        return result.scalars().all()


bot_config_repo = BotConfigRepository()
bot_command_repo = BotCommandRepository()
bot_chat_log_repo = BotChatLogRepository()
