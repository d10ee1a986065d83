from sqlalchemy import Column, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from fanpage.core.database import Base
from fanpage.core.enums import MemoStatus, MemoColor
from fanpage.models._helpers import new_id, utcnow

class CollaborationMemo(Base):
    __tablename__ = "collaboration_memos"

    id = Column(String(36), primary_key=True, default=new_id)
    target = Column(String(200), nullable=False) # 협업 대상
    content = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=MemoStatus.PENDING.value)
    color = Column(String(20), nullable=False, default=MemoColor.YELLOW.value)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    comments = relationship(
        "CollaborationMemoComment",
        back_populates="memo",
        cascade="all, delete-orphan",
        order_by="CollaborationMemoComment.created_at",
    )

class CollaborationMemoComment(Base):
    __tablename__ = "collaboration_memo_comments"

    id = Column(String(36), primary_key=True, default=new_id)
    memo_id = Column(String(36), ForeignKey("collaboration_memos.id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    memo = relationship("CollaborationMemo", back_populates="comments")
