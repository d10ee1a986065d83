from enum import Enum

class AdminRole(str, Enum):
    ADMIN = "admin"       # 1등급: 최고 관리자 (ADMIN_PASSWORD)
    STAFF = "staff"       # 2등급: 스탭 (STAFF_PASSWORD)
    VISITOR = "visitor"   # 3등급: 비지터 (VISITOR_PASSWORD)
    GUEST = "guest"       # 4등급: 게스트 (비로그인)

class MemoStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

class MemoColor(str, Enum):
    YELLOW = "yellow"
    GREEN = "green"
    RED = "red"

class BotCommandPermission(str, Enum):
    EVERYONE = "everyone"
    SUBSCRIBER = "subscriber"   # 구독자 이상
    MODERATOR = "moderator"     # 매니저 이상
    STREAMER = "streamer"       # 방송인 본인만

class BotMessageType(str, Enum):
    CHAT = "chat"
    DONATION = "donation"
    SUBSCRIPTION = "subscription"
    SYSTEM = "system"
