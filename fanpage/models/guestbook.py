from sqlalchemy import Column, String, DateTime, Text
from fanpage.core.database import Base
from fanpage.models._helpers import new_id, utcnow

class GuestbookEntry(Base):
    __tablename__ = "guestbook_entries"

    id = Column(String(36), primary_key=True, default=new_id)
    author = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    user_key = Column(String(200), nullable=False, index=True) # 브라우저별 작성자 증명 토큰 (계정 아님)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

class PinnedGuestbook(Base):
    __tablename__ = "pinned_guestbook"

    # 싱글톤 행: 고정 식별자 constants.PINNED_GUESTBOOK_KEY 하나만 존재
    id = Column(String(20), primary_key=True)
    # FK 제약 없음: 대상 존재 여부는 삭제 시 cascade로만 관리
    guestbook_id = Column(String(36), nullable=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
