from typing import List
from datetime import datetime
from pydantic import BaseModel, ConfigDict

class MemoCreate(BaseModel):
    target: str = ""
    content: str = ""

class MemoStatusUpdate(BaseModel):
    status: str

class MemoCommentCreate(BaseModel):
    content: str = ""

class MemoCommentResponse(BaseModel):
    id: str
    memo_id: str
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class MemoResponse(BaseModel):
    id: str
    target: str
    content: str
    status: str
    color: str
    created_at: datetime
    comments: List[MemoCommentResponse] = []

    model_config = ConfigDict(from_attributes=True)
