from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, func
from sqlalchemy.orm import relationship
from app.core.database import Base


class Job(Base):
    """
    Job posting created by an admin. Tests are generated against its
    title, description, experience level and skills.
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    experience = Column(String(100), nullable=False)

    # List of skill names
    skills = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    tests = relationship(
        "Test",
        back_populates="job",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}')>"
