from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

class GuestbookCreate(BaseModel):
    # 빈 값 검증은 서비스에서 400으로 처리
    author: str = Field("", description="작성자")
    content: str = Field("", description="방명록 내용")
    user_key: str = Field("", description="브라우저별 작성자 증명 토큰")

class GuestbookDeleteRequest(BaseModel):
    user_key: Optional[str] = None

class GuestbookResponse(BaseModel):
    id: str
    author: str
    content: str
    user_key: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class PinnedGuestbookResponse(BaseModel):
    guestbook_id: Optional[str] = None

class PinnedGuestbookUpdate(BaseModel):
    guestbook_id: Optional[str] = None
