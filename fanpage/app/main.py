# fanpage/app/main.py
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from fanpage.core.config import settings
from fanpage.core.database import wait_for_db, create_all_tables
from fanpage.core.rate_limit import init_rate_limiter
from fanpage.core.exceptions import FanpageError
from fanpage.app.exception_handlers import fanpage_exception_handler, general_exception_handler
from fanpage.app.routers import auth, board, notice, visitor, memo, bot, bot_commands

@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        # 1. fastapi-limiter 초기화 (Redis)
        if settings.RATE_LIMIT_ENABLED:
            await init_rate_limiter()
        # 2. DB 연결 대기
        await wait_for_db()
        # 3. 테이블 생성 (없을 때만)
        await create_all_tables()
    except Exception as e:
        print(f"[lifespan] Startup failure: {e}")

    yield

    if settings.DEBUG:
        print("[lifespan] Shutdown complete")

# API Docs 태그 순서 정의
tags_metadata = [
    {"name": "auth", "description": "Admin session (login / logout / role)"},
    {"name": "guestbook", "description": "Guestbook board & pinned entry"},
    {"name": "notice", "description": "Site notice"},
    {"name": "visitor", "description": "Visitor counter & statistics"},
    {"name": "collaboration_memo", "description": "Collaboration memos for admins and staff"},
    {"name": "bot", "description": "Chat bot configs, commands, chat logs & worker control"},
]

app = FastAPI(
    title="Fanpage API",
    description="Song-request fan site backend",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=tags_metadata # 태그 순서 적용
)

# Prometheus Metrics (Expose /metrics)
Instrumentator().instrument(app).expose(app)

# CORS 설정: 세션 쿠키를 쓰므로 allow_credentials 필요 (* 사용 불가)
if settings.DEBUG:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:[0-9]+)?", # 로컬호스트 모든 포트 허용
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.add_exception_handler(FanpageError, fanpage_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(auth.router, prefix="/api")
app.include_router(board.router, prefix="/api")
app.include_router(notice.router, prefix="/api")
app.include_router(visitor.router, prefix="/api")
app.include_router(memo.router, prefix="/api")
app.include_router(bot.router, prefix="/api")
app.include_router(bot_commands.router, prefix="/api")

@app.get("/health")
async def health_check():
    return {"status": "ok", "environment": settings.ENVIRONMENT}
