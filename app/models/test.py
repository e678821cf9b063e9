"""
Test database model.

A test is a pool of LLM-generated multiple-choice questions scoped to a job.
Each candidate receives a random subset of the pool when they start.
"""

import enum
from sqlalchemy import Column, Integer, String, ForeignKey, Enum, DateTime, JSON, func
from sqlalchemy.orm import relationship
from app.core.database import Base


class TestComplexity(str, enum.Enum):
    """Difficulty requested at generation time; also selects the time limit."""
    __test__ = False

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Test(Base):
    """
    Generated question pool for a job.

    `questions` holds a list of dicts:
        {"question": str, "options": [str x4], "correct_answer": int, "explanation": str | None}
    where correct_answer is always the zero-based option index.
    """
    __test__ = False
    __tablename__ = "tests"

    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    complexity = Column(Enum(TestComplexity), nullable=False)

    questions = Column(JSON, nullable=False, default=list)

    # Short code used in candidate links
    short_code = Column(String(10), unique=True, nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    job = relationship("Job", back_populates="tests")
    candidates = relationship(
        "Candidate",
        back_populates="test",
        cascade="all, delete-orphan",
    )

    @property
    def question_count(self) -> int:
        return len(self.questions or [])

    def __repr__(self):
        return f"<Test(id={self.id}, job_id={self.job_id}, complexity={self.complexity.value})>"
