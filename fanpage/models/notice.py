from sqlalchemy import Column, Integer, Boolean, DateTime, Text
from fanpage.core.database import Base
from fanpage.models._helpers import utcnow

class Notice(Base):
    __tablename__ = "notices"

    id = Column(Integer, primary_key=True, autoincrement=False) # 항상 constants.NOTICE_ID
    content = Column(Text, nullable=False, default="")
    is_visible = Column(Boolean, nullable=False, default=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
