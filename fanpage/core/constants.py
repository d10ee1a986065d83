# --- Session Cookie ---
ADMIN_SESSION_COOKIE = "admin_session"

# --- Guestbook ---
PINNED_GUESTBOOK_KEY = "main"  # 고정글 싱글톤 행의 고정 식별자
DEFAULT_PAGE_SIZE = 50

# --- Notice ---
NOTICE_ID = 1

# --- Redis Channels ---
REDIS_CHANNEL_BOT_CONTROL = "bot:control"

# --- Bot Control Actions ---
BOT_ACTION_CONNECT = "connect"
BOT_ACTION_DISCONNECT = "disconnect"

# --- Bot Worker Auth ---
BOT_API_KEY_HEADER = "X-API-Key"
