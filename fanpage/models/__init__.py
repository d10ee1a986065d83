# fanpage/models/__init__.py
from .guestbook import GuestbookEntry, PinnedGuestbook
from .notice import Notice
from .visitor import VisitorCount
from .memo import CollaborationMemo, CollaborationMemoComment
from .bot import BotConfig, BotCommand, BotChatLog
from fanpage.core.database import Base


# 이것들을 expose 해야 create_all이 인식함
__all__ = [
    "Base",
    "GuestbookEntry", "PinnedGuestbook",
    "Notice",
    "VisitorCount",
    "CollaborationMemo", "CollaborationMemoComment",
    "BotConfig", "BotCommand", "BotChatLog",
]
