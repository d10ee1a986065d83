import uuid
from datetime import datetime, timezone

def new_id() -> str:
    return str(uuid.uuid4())

def utcnow() -> datetime:
    # DB 서버 시계 대신 앱 시계 사용 (마이크로초 단위 정렬 보장)
    return datetime.now(timezone.utc)
