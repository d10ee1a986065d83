from sqlalchemy import Column, Integer, Date
from fanpage.core.database import Base

class VisitorCount(Base):
    __tablename__ = "visitor_counts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, unique=True, nullable=False, index=True) # 서버 로컬 날짜 기준 하루 1행
    count = Column(Integer, nullable=False, default=0)
