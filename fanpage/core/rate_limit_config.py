# API별 rate limit 설정을 한 곳에서 관리
from fastapi_limiter.depends import RateLimiter
from fanpage.core.config import settings

# 엔드포인트별 rate limit 설정 (경로: 제한)
API_RATE_LIMITS = {
    # 인증
    "/api/login": {"times": 10, "seconds": 60},
    "/api/auth": {"times": 100, "seconds": 10},

    # 방명록
    "/api/board": {"times": 100, "seconds": 10},
    "/api/board/write": {"times": 5, "seconds": 60},
    "/api/board/{entry_id}": {"times": 50, "seconds": 10},
    "/api/board/pinned": {"times": 100, "seconds": 10},

    # 공지 / 방문자
    "/api/notice": {"times": 100, "seconds": 10},
    "/api/visitor": {"times": 30, "seconds": 60},
    "/api/visitor/stats": {"times": 50, "seconds": 10},

    # 협업 메모
    "/api/collaboration-memo": {"times": 50, "seconds": 10},

    # 봇
    "/api/bot/config": {"times": 25, "seconds": 10},
    "/api/bot/activate": {"times": 10, "seconds": 10},
    "/api/bot/commands": {"times": 25, "seconds": 10},
    "/api/bot/configs/active": {"times": 60, "seconds": 60},
    "/api/bot/status": {"times": 60, "seconds": 60},
    "/api/bot/chat-logs": {"times": 300, "seconds": 60},
    "/api/bot/chat-logs/recent": {"times": 30, "seconds": 10},
}

async def _noop_dep():
    return None

def get_rate_limiter(path: str):
    conf = API_RATE_LIMITS.get(path)
    if not settings.RATE_LIMIT_ENABLED or not conf:
        # 비활성화 시 FastAPI가 의존성을 요구하므로 no-op 콜러블을 반환
        return _noop_dep
    return RateLimiter(times=conf["times"], seconds=conf["seconds"])
