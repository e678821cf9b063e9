import logging
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user
from app.crud import job as job_crud
from app.models.user import User
from app.schemas.job import (
    JobCreateRequest,
    JobUpdateRequest,
    JobResponse,
    JobDetailsRequest,
    JobDetailsResponse,
)
from app.services.question_generator import generate_job_details, QuestionGenerationError

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobResponse)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """Create a new job posting."""
    try:
        new_job = job_crud.create(db, request)
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating job: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to create job: {str(e)}")

    logger.info(f"Created job {new_job.id}: {new_job.title}")
    return new_job


@router.post("/generate-details", response_model=JobDetailsResponse)
async def generate_details(
    request: JobDetailsRequest,
    admin_user: User = Depends(get_admin_user)
):
    """
    Draft a description, skill list and experience level for a job title.

    Nothing is saved; the admin reviews the draft and submits it via POST /jobs/.
    """
    try:
        return await generate_job_details(request.title)
    except QuestionGenerationError as e:
        logger.error(f"Job details generation failed for '{request.title}': {e}")
        raise HTTPException(status_code=502, detail=f"Failed to generate job details: {str(e)}")


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    job = job_crud.get_by_id(db, job_id)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


@router.get("/", response_model=list[JobResponse])
def list_jobs(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db)
):
    """
    List jobs, newest first.

    Args:
        skip: Number of records to skip (default: 0)
        limit: Maximum number of records to return (default: 100, max: 100)
    """
    if limit > 100:
        limit = 100

    return job_crud.get_multi(db, skip=skip, limit=limit)


@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """Update a job; omitted fields are left unchanged."""
    try:
        job = job_crud.update(db, job_id, request)
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating job {job_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to update job: {str(e)}")

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Updated job {job_id}")
    return job


@router.delete("/{job_id}", status_code=204)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Delete a job by ID. Its tests and candidate attempts are deleted too.
    """
    deleted = job_crud.delete(db, job_id)

    if not deleted:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Deleted job {job_id}")
    return None
