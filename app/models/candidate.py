"""
Candidate database model.

One row per (email, test) attempt. The row is created on the first start
and mutated in place through every later transition of the test session.
"""

from datetime import datetime, timezone
from sqlalchemy import (
    Column, Integer, String, ForeignKey, Enum, Text, DateTime, JSON, Uuid, UniqueConstraint
)
from sqlalchemy.orm import relationship
import enum
from app.core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CandidateStatus(str, enum.Enum):
    """
    Test session lifecycle:

    (start) -> IN_PROGRESS -> COMPLETED
                    |
                    v
               LOCKED_OUT -> REAPPEARANCE_REQUESTED
                    |                |
                    +-- admin approval --> IN_PROGRESS (re-armed)
    """
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    LOCKED_OUT = "locked_out"
    REAPPEARANCE_REQUESTED = "reappearance_requested"


class Candidate(Base):
    """
    A candidate's attempt at a test.

    `questions` is the frozen subset sampled from the test pool at start time;
    `answers` is aligned position by position with it.
    """
    __tablename__ = "candidates"
    __table_args__ = (
        # One attempt row per candidate e-mail per test
        UniqueConstraint("email", "test_id", name="uq_candidate_email_test"),
    )

    id = Column(Integer, primary_key=True, index=True)
    test_id = Column(Integer, ForeignKey("tests.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String, nullable=False)
    email = Column(String(320), nullable=False, index=True)

    # Assigned subset and submitted answers
    questions = Column(JSON, nullable=True)
    answers = Column(JSON, nullable=True)

    score = Column(Integer, nullable=True)
    total_questions = Column(Integer, nullable=True)

    status = Column(
        Enum(CandidateStatus),
        default=CandidateStatus.IN_PROGRESS,
        nullable=False,
        index=True
    )
    lockout_reason = Column(Text, nullable=True)  # e.g. "tab_switch"

    # Reappearance workflow
    reappearance_requested_at = Column(DateTime(timezone=True), nullable=True)
    reappearance_approved_at = Column(DateTime(timezone=True), nullable=True)
    reappearance_approved_by = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Timestamps
    started_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    test = relationship("Test", back_populates="candidates")

    def __repr__(self):
        return f"<Candidate(id={self.id}, email='{self.email}', test_id={self.test_id}, status={self.status.value})>"
