from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

class NoticeResponse(BaseModel):
    id: int
    content: str
    is_visible: bool
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class NoticeContentUpdate(BaseModel):
    content: str

class NoticeVisibilityUpdate(BaseModel):
    is_visible: bool
