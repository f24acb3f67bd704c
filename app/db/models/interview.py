"""
Interview model: one structured mock interview created for a user.
"""
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func
from app.db.base import Base
from app.db.models.user import generate_id


class Interview(Base):
    __tablename__ = "interviews"

    id = Column(String(64), primary_key=True, index=True, default=generate_id)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=True, index=True)
    role = Column(String, nullable=False)
    level = Column(String, nullable=True)
    type = Column(String, nullable=True)  # technical / behavioural / mixed
    techstack = Column(JSON, nullable=True)
    questions = Column(JSON, nullable=True)
    finalized = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Interview(id={self.id}, role={self.role})>"
