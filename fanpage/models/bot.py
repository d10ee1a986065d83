from sqlalchemy import Column, String, Boolean, DateTime, Integer, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from fanpage.core.database import Base
from fanpage.core.enums import BotCommandPermission
from fanpage.models._helpers import new_id, utcnow

class BotConfig(Base):
    __tablename__ = "bot_configs"

    id = Column(String(36), primary_key=True, default=new_id)
    channel_id = Column(String(100), unique=True, nullable=False, index=True)
    channel_name = Column(String(100), nullable=False)
    welcome_message = Column(Text, nullable=True)

    auto_reply_enabled = Column(Boolean, nullable=False, default=True)
    moderation_enabled = Column(Boolean, nullable=False, default=False)
    donation_alert_enabled = Column(Boolean, nullable=False, default=True)

    # 관리자가 켠 상태 (activate API로만 변경)
    is_active = Column(Boolean, nullable=False, default=False)
    # 워커가 보고한 실제 연결 상태 (status API로만 변경)
    is_connected = Column(Boolean, nullable=False, default=False)
    error_message = Column(Text, nullable=True)
    last_connected = Column(DateTime(timezone=True), nullable=True)
    last_disconnected = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    commands = relationship(
        "BotCommand",
        back_populates="config",
        cascade="all, delete-orphan",
        order_by="BotCommand.created_at.desc()",
    )

class BotCommand(Base):
    __tablename__ = "bot_commands"
    __table_args__ = (
        UniqueConstraint("config_id", "trigger", name="uq_bot_command_trigger"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    config_id = Column(String(36), ForeignKey("bot_configs.id", ondelete="CASCADE"), nullable=False, index=True)
    trigger = Column(String(50), nullable=False) # "!" 로 시작
    response = Column(Text, nullable=False)
    permission = Column(String(20), nullable=False, default=BotCommandPermission.EVERYONE.value)
    cooldown = Column(Integer, nullable=False, default=0) # 초
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    config = relationship("BotConfig", back_populates="commands")

class BotChatLog(Base):
    __tablename__ = "bot_chat_logs"

    id = Column(String(36), primary_key=True, default=new_id)
    config_id = Column(String(36), ForeignKey("bot_configs.id", ondelete="CASCADE"), nullable=False, index=True)
    username = Column(String(100), nullable=False)
    message = Column(Text, nullable=False)
    message_type = Column(String(20), nullable=False) # chat, donation, subscription, system
    timestamp = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
