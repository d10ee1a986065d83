from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.core.database import get_db
from fanpage.core.deps import require_admin
from fanpage.core.rate_limit_config import get_rate_limiter
from fanpage.schemas.bot import BotCommandCreate, BotCommandResponse, BotCommandUpdate
from fanpage.services import bot_command_service

# 봇 명령어 관리 (관리자 전용)
router = APIRouter(
    prefix="/bot/commands",
    tags=["bot"],
    dependencies=[Depends(require_admin), Depends(get_rate_limiter("/api/bot/commands"))],
)

@router.get("", response_model=List[BotCommandResponse])
async def list_bot_commands(config_id: Optional[str] = None, db: AsyncSession = Depends(get_db)):
    return await bot_command_service.list_commands(db, config_id)

@router.post("", response_model=BotCommandResponse, status_code=status.HTTP_201_CREATED)
async def create_bot_command(payload: BotCommandCreate, db: AsyncSession = Depends(get_db)):
    """
    명령어 등록. 트리거는 "!"로 시작 (permission 기본 everyone, cooldown 기본 0초)
    """
    return await bot_command_service.create_command(db, payload)

@router.patch("/{command_id}", response_model=BotCommandResponse)
async def update_bot_command(command_id: str, payload: BotCommandUpdate, db: AsyncSession = Depends(get_db)):
    return await bot_command_service.update_command(db, command_id, payload)

@router.delete("/{command_id}")
async def delete_bot_command(command_id: str, db: AsyncSession = Depends(get_db)):
    return await bot_command_service.delete_command(db, command_id)
