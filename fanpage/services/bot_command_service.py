from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from fanpage.core.enums import BotCommandPermission
from fanpage.core.exceptions import (
    BotCommandAlreadyExistsError,
    BotCommandNotFoundError,
    BotConfigNotFoundError,
    InvalidInputError,
)
from fanpage.models.bot import BotCommand
from fanpage.repository.bot import bot_command_repo, bot_config_repo
from fanpage.schemas.bot import BotCommandCreate, BotCommandUpdate
from fanpage.services.common.transaction import transaction

TRIGGER_PREFIX = "!"

def _validate_trigger(trigger: str) -> None:
    if not trigger.startswith(TRIGGER_PREFIX):
        raise InvalidInputError(f"Trigger must start with '{TRIGGER_PREFIX}'")

def _validate_permission(permission: str) -> str:
    try:
        return BotCommandPermission(permission).value
    except ValueError:
        raise InvalidInputError(f"Invalid permission: {permission}")

def _validate_cooldown(cooldown: int) -> int:
    if cooldown < 0:
        raise InvalidInputError("cooldown must be 0 or greater")
    return cooldown

async def _get_or_404(db: AsyncSession, command_id: str) -> BotCommand:
    command = await bot_command_repo.get(db, command_id)
    if not command:
        raise BotCommandNotFoundError()
    return command

async def list_commands(db: AsyncSession, config_id: Optional[str]) -> List[BotCommand]:
    if not config_id:
        raise InvalidInputError("config_id is required")
    return await bot_command_repo.list_for_config(db, config_id)

async def create_command(db: AsyncSession, payload: BotCommandCreate) -> BotCommand:
    """
    명령어 등록. 트리거는 "!"로 시작하고 채널 안에서 유일해야 합니다.
    """
    if not payload.config_id or not payload.trigger or not payload.response:
        raise InvalidInputError("config_id, trigger and response are required")
    _validate_trigger(payload.trigger)
    permission = _validate_permission(payload.permission or BotCommandPermission.EVERYONE.value)
    cooldown = _validate_cooldown(payload.cooldown or 0)

    if not await bot_config_repo.get(db, payload.config_id):
        raise BotConfigNotFoundError()
    if await bot_command_repo.find_by_trigger(db, payload.config_id, payload.trigger):
        raise BotCommandAlreadyExistsError()

    command = BotCommand(
        config_id=payload.config_id,
        trigger=payload.trigger,
        response=payload.response,
        permission=permission,
        cooldown=cooldown,
        is_active=True,
    )
    async with transaction(db, "create bot command"):
        await bot_command_repo.add(db, command)
    return command

async def update_command(db: AsyncSession, command_id: str, payload: BotCommandUpdate) -> BotCommand:
    command = await _get_or_404(db, command_id)

    if payload.trigger is not None:
        _validate_trigger(payload.trigger)
        if payload.trigger != command.trigger:
            if await bot_command_repo.find_by_trigger(db, command.config_id, payload.trigger):
                raise BotCommandAlreadyExistsError()
    if payload.response is not None and not payload.response:
        raise InvalidInputError("response must not be empty")
    permission = _validate_permission(payload.permission) if payload.permission is not None else None
    cooldown = _validate_cooldown(payload.cooldown) if payload.cooldown is not None else None

    async with transaction(db, "update bot command"):
        if payload.trigger is not None:
            command.trigger = payload.trigger
        if payload.response is not None:
            command.response = payload.response
        if permission is not None:
            command.permission = permission
        if cooldown is not None:
            command.cooldown = cooldown
        if payload.is_active is not None:
            command.is_active = payload.is_active
    return command

async def delete_command(db: AsyncSession, command_id: str) -> dict:
    command = await _get_or_404(db, command_id)
    async with transaction(db, "delete bot command"):
        await bot_command_repo.remove(db, command)
    return {"success": True}
