from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

class BotConfigUpsert(BaseModel):
    channel_id: str = ""
    channel_name: str = ""
    welcome_message: Optional[str] = None
    auto_reply_enabled: Optional[bool] = None
    moderation_enabled: Optional[bool] = None
    donation_alert_enabled: Optional[bool] = None

class BotActivateRequest(BaseModel):
    channel_id: str = ""
    is_active: bool

class BotActivateResponse(BaseModel):
    success: bool = True
    message: str

class BotConfigResponse(BaseModel):
    id: str
    channel_id: str
    channel_name: str
    welcome_message: Optional[str] = None
    auto_reply_enabled: bool
    moderation_enabled: bool
    donation_alert_enabled: bool
    is_active: bool
    is_connected: bool = False
    error_message: Optional[str] = None
    last_connected: Optional[datetime] = None
    last_disconnected: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

# --- 명령어 ---
class BotCommandCreate(BaseModel):
    config_id: str = ""
    trigger: str = ""
    response: str = ""
    permission: Optional[str] = None # 기본 everyone
    cooldown: Optional[int] = None   # 기본 0초

class BotCommandUpdate(BaseModel):
    trigger: Optional[str] = None
    response: Optional[str] = None
    permission: Optional[str] = None
    cooldown: Optional[int] = None
    is_active: Optional[bool] = None

class BotCommandResponse(BaseModel):
    id: str
    config_id: str
    trigger: str
    response: str
    permission: str
    cooldown: int
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class BotConfigDetailResponse(BotConfigResponse):
    commands: List[BotCommandResponse] = []

# --- 워커 보고 ---
class BotStatusUpdate(BaseModel):
    is_connected: Optional[bool] = None
    last_connected: Optional[datetime] = None
    last_disconnected: Optional[datetime] = None
    error_message: Optional[str] = None

class BotChatLogCreate(BaseModel):
    config_id: str = ""
    username: str = ""
    message: str = ""
    message_type: str = ""

class BotChatLogResponse(BaseModel):
    id: str
    username: str
    message: str
    message_type: str
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)

class BotChatLogList(BaseModel):
    logs: List[BotChatLogResponse]
    count: int
