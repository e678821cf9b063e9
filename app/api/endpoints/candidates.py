"""
API endpoints for candidate test sessions.

Candidate-facing (public): start, submit, lockout, request-reappearance,
check-status and the public attempt view.
Admin-only: approve-reappearance, listing, detail and delete.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user
from app.crud import candidate as candidate_crud
from app.models.candidate import CandidateStatus
from app.models.user import User
from app.schemas.candidate import (
    CandidateStartRequest,
    CandidateStartResponse,
    CandidateSubmitRequest,
    SubmitResultResponse,
    CandidateLockoutRequest,
    CandidateIdRequest,
    SuccessResponse,
    CandidateStatusRequest,
    CandidateStatusResponse,
    CandidatePublicResponse,
    CandidateResponse,
    CandidateListResponse,
)
from app.services import test_session
from app.services.test_session import SessionError

router = APIRouter(prefix="/candidates", tags=["Candidates"])
logger = logging.getLogger(__name__)


def _session_error_response(error: SessionError) -> JSONResponse:
    # Same "detail" body as HTTPException, plus status/candidate_id when set
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@router.post("/start", response_model=CandidateStartResponse)
def start_test(request: CandidateStartRequest, db: Session = Depends(get_db)):
    """
    Start or resume a test attempt.

    Returns the same candidate_id for a resumed attempt. A completed or
    locked-out attempt can only be restarted after admin approval.

    Raises:
        HTTPException 404: Test or its questions not found
        HTTPException 403: Already attempted or pending approval
    """
    try:
        candidate = test_session.start(db, request.test_id, request.name, request.email)
    except SessionError as e:
        return _session_error_response(e)

    return CandidateStartResponse(candidate_id=candidate.id)


@router.post("/submit", response_model=SubmitResultResponse)
def submit_test(request: CandidateSubmitRequest, db: Session = Depends(get_db)):
    """
    Score the attempt. Pass mark is 85%.

    Raises:
        HTTPException 404: Candidate not found
        HTTPException 400: No questions assigned
        HTTPException 403: Attempt locked out or time limit expired
    """
    try:
        return test_session.submit(db, request.candidate_id, request.answers)
    except SessionError as e:
        return _session_error_response(e)


@router.post("/lockout", response_model=SuccessResponse)
def lockout_candidate(request: CandidateLockoutRequest, db: Session = Depends(get_db)):
    """End an attempt after an anti-cheating trigger (e.g. tab switch)."""
    try:
        test_session.lockout(db, request.candidate_id, request.reason, request.answers)
    except SessionError as e:
        return _session_error_response(e)

    return SuccessResponse()


@router.post("/request-reappearance", response_model=SuccessResponse)
def request_reappearance(request: CandidateIdRequest, db: Session = Depends(get_db)):
    """Ask an admin for permission to retake a locked-out test."""
    try:
        test_session.request_reappearance(db, request.candidate_id)
    except SessionError as e:
        return _session_error_response(e)

    return SuccessResponse()


@router.post("/approve-reappearance", response_model=SuccessResponse)
def approve_reappearance(
    request: CandidateIdRequest,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Allow a candidate to retake the test. A fresh question set is drawn when
    the candidate next starts.
    """
    try:
        test_session.approve_reappearance(db, request.candidate_id, admin_user.id)
    except SessionError as e:
        return _session_error_response(e)

    return SuccessResponse()


@router.post("/check-status", response_model=CandidateStatusResponse)
def check_status(request: CandidateStatusRequest, db: Session = Depends(get_db)):
    """Report whether this e-mail already has an attempt on the test."""
    candidate = candidate_crud.get_by_email_and_test(db, request.email, request.test_id)

    if not candidate:
        return CandidateStatusResponse(exists=False)

    return CandidateStatusResponse(
        exists=True,
        candidate=CandidatePublicResponse.model_validate(candidate)
    )


@router.get("/public/{candidate_id}", response_model=CandidatePublicResponse)
def get_public_candidate(candidate_id: int, db: Session = Depends(get_db)):
    """Candidate's own view of the attempt: assigned questions without answers."""
    candidate = candidate_crud.get_by_id(db, candidate_id)

    if not candidate:
        raise HTTPException(status_code=404, detail="Candidate not found")

    return candidate


@router.get("/", response_model=list[CandidateListResponse])
def list_candidates(
    test_id: Optional[int] = None,
    status: Optional[CandidateStatus] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """List attempts, most recent first, optionally by test and status."""
    if limit > 100:
        limit = 100

    return candidate_crud.get_multi(db, skip=skip, limit=limit, test_id=test_id, status=status)


@router.get("/{candidate_id}", response_model=CandidateResponse)
def get_candidate(
    candidate_id: int,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """Full attempt detail including correct answers."""
    candidate = candidate_crud.get_by_id(db, candidate_id)

    if not candidate:
        raise HTTPException(status_code=404, detail="Candidate not found")

    return candidate


@router.delete("/{candidate_id}", status_code=204)
def delete_candidate(
    candidate_id: int,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """Delete an attempt, freeing the e-mail to start the test again."""
    deleted = candidate_crud.delete(db, candidate_id)

    if not deleted:
        raise HTTPException(status_code=404, detail="Candidate not found")

    logger.info(f"Admin {admin_user.id} deleted candidate {candidate_id}")
    return None
