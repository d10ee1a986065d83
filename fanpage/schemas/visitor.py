from pydantic import BaseModel

class VisitorStats(BaseModel):
    today: int = 0
    yesterday: int = 0
    week: int = 0
    month: int = 0
    total: int = 0
    avg: int = 0

class PublicVisitorStats(VisitorStats):
    public: bool = True # 비관리자에게 반환되는 기본값 표시

class VisitorDateCount(BaseModel):
    date: str
    count: int
