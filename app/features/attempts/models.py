import uuid
from enum import Enum

from sqlalchemy import Column, String, Integer, Boolean, Date, DateTime, Text, ForeignKey, Index, Uuid
from sqlalchemy.sql import func

from app.DB.base import Base


class ConfidenceLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class AttemptEntry(Base):
    """One recorded attempt. Rows for the same (user, list, problem) accumulate; none overwrite another."""

    __tablename__ = "attempt_entries"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    list_id = Column(Uuid(as_uuid=True), ForeignKey("lists.id", ondelete="CASCADE"), nullable=False)
    neet250_id = Column(Integer, nullable=False)
    solved = Column(Boolean, nullable=True)
    date_solved = Column(Date, nullable=True)
    time_minutes = Column(Integer, nullable=True)
    attempts = Column(Integer, nullable=True)
    confidence = Column(String(16), nullable=True)  # ConfidenceLevel value
    time_complexity = Column(String(64), nullable=True)
    space_complexity = Column(String(64), nullable=True)
    notes = Column(Text, nullable=True)
    problem_url = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<AttemptEntry id={self.id} list={self.list_id} neet250_id={self.neet250_id} solved={self.solved}>"


Index("ix_attempt_entries_user_updated", AttemptEntry.user_id, AttemptEntry.updated_at)
Index("ix_attempt_entries_scope", AttemptEntry.user_id, AttemptEntry.list_id, AttemptEntry.neet250_id)
