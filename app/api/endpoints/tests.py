"""
API endpoints for tests (generated question pools).

Candidates resolve a test by id or short code without authentication;
everything that exposes correct answers or changes data is admin-only.
"""

import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.deps import get_admin_user
from app.crud import job as job_crud
from app.crud import test as test_crud
from app.models.test import Test
from app.models.user import User
from app.schemas.test import (
    TestGenerateRequest,
    TestGenerateResponse,
    TestResponse,
    TestPublicResponse,
    TestQuestionsResponse,
)
from app.services.question_generator import generate_question_pool, QuestionGenerationError
from app.services.test_session import duration_for

router = APIRouter(prefix="/tests", tags=["Tests"])
logger = logging.getLogger(__name__)


def _public_view(test: Test) -> TestPublicResponse:
    return TestPublicResponse(
        id=test.id,
        job_id=test.job_id,
        job_title=test.job.title,
        complexity=test.complexity,
        short_code=test.short_code,
        question_count=test.question_count,
        questions_per_candidate=min(settings.QUESTIONS_PER_CANDIDATE, test.question_count),
        duration_minutes=int(duration_for(test.complexity).total_seconds() // 60),
    )


@router.post("/generate", status_code=201, response_model=TestGenerateResponse)
async def generate_test(
    request: TestGenerateRequest,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Generate a question pool for a job with the LLM and save it as a new test.

    The test row and its short code are committed together after generation
    succeeds, so a failed generation leaves nothing behind.

    Raises:
        HTTPException 404: If the job doesn't exist
        HTTPException 502: If the LLM could not produce a valid pool
    """
    job = job_crud.get_by_id(db, request.job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info(f"Generating {request.complexity.value} test for job {job.id}: {job.title}")

    try:
        questions = await generate_question_pool(job, request.complexity)
    except QuestionGenerationError as e:
        logger.error(f"Question generation failed for job {job.id}: {e}")
        raise HTTPException(status_code=502, detail=f"Failed to generate test questions: {str(e)}")

    try:
        test = test_crud.create_with_short_code(db, job.id, request.complexity, questions)
    except Exception as e:
        db.rollback()
        logger.error(f"Error saving generated test for job {job.id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to save test: {str(e)}")

    logger.info(f"Created test {test.id} ({test.question_count} questions, short code {test.short_code})")

    return TestGenerateResponse(
        test_id=test.id,
        short_code=test.short_code,
        question_count=test.question_count
    )


@router.get("/", response_model=list[TestResponse])
def list_tests(
    job_id: Optional[int] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """List tests, newest first, optionally for a single job."""
    if limit > 100:
        limit = 100

    return test_crud.get_multi(db, skip=skip, limit=limit, job_id=job_id)


@router.get("/short-code/{short_code}", response_model=TestPublicResponse)
def get_test_by_short_code(short_code: str, db: Session = Depends(get_db)):
    """Resolve a candidate link code to its test."""
    test = test_crud.get_by_short_code(db, short_code)

    if not test:
        raise HTTPException(status_code=404, detail="Test not found")

    return _public_view(test)


@router.get("/{test_id}", response_model=TestPublicResponse)
def get_test(test_id: int, db: Session = Depends(get_db)):
    """Public test summary for the candidate landing page (no questions)."""
    test = test_crud.get_by_id(db, test_id)

    if not test:
        raise HTTPException(status_code=404, detail="Test not found")

    return _public_view(test)


@router.get("/{test_id}/questions", response_model=TestQuestionsResponse)
def get_test_questions(
    test_id: int,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """Full question pool with correct answers as letters."""
    test = test_crud.get_by_id(db, test_id)

    if not test:
        raise HTTPException(status_code=404, detail="Test not found")

    return test


@router.delete("/{test_id}", status_code=204)
def delete_test(
    test_id: int,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """Delete a test and every candidate attempt on it."""
    deleted = test_crud.delete(db, test_id)

    if not deleted:
        raise HTTPException(status_code=404, detail="Test not found")

    logger.info(f"Deleted test {test_id}")
    return None
