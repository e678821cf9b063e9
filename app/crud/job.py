"""
CRUD operations for Job model.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.job import Job
from app.schemas.job import JobCreateRequest, JobUpdateRequest


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with id
    """
    db_job = Job(
        title=job_data.title,
        description=job_data.description,
        experience=job_data.experience,
        skills=list(job_data.skills),
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: int) -> Optional[Job]:
    """Retrieve a job by its ID, or None."""
    return db.query(Job).filter(Job.id == job_id).first()


def get_by_title(db: Session, title: str) -> Optional[Job]:
    return db.query(Job).filter(Job.title == title).first()


def get_multi(db: Session, skip: int = 0, limit: int = 100) -> List[Job]:
    """
    Retrieve jobs newest first, with pagination.

    Args:
        db: Database session
        skip: Number of records to skip (offset)
        limit: Maximum number of records to return
    """
    return (
        db.query(Job)
        .order_by(Job.created_at.desc(), Job.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def update(db: Session, job_id: int, job_data: JobUpdateRequest) -> Optional[Job]:
    """
    Apply a partial update to a job.

    Returns:
        Updated Job instance if found, None otherwise
    """
    job = get_by_id(db, job_id)
    if not job:
        return None

    for field, value in job_data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, job_id: int) -> bool:
    """
    Delete a job by ID. Its tests and their candidates go with it.

    Returns:
        True if deleted, False if not found
    """
    job = get_by_id(db, job_id)
    if not job:
        return False

    db.delete(job)
    db.commit()

    return True
