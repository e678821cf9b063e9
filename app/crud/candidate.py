"""
CRUD operations for Candidate model.

State transitions live in app.services.test_session; this module only reads,
inserts and deletes rows.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from app.models.candidate import Candidate, CandidateStatus


def normalize_email(email: str) -> str:
    return email.strip().lower()


def create(
    db: Session,
    test_id: int,
    name: str,
    email: str,
    questions: List[Dict[str, Any]],
) -> Candidate:
    """
    Insert a new in-progress attempt.

    Raises:
        sqlalchemy.exc.IntegrityError: If an attempt for (email, test) already exists.
            The caller is responsible for rolling back.
    """
    candidate = Candidate(
        test_id=test_id,
        name=name,
        email=normalize_email(email),
        questions=questions,
        status=CandidateStatus.IN_PROGRESS,
    )

    db.add(candidate)
    db.commit()
    db.refresh(candidate)

    return candidate


def get_by_id(db: Session, candidate_id: int) -> Optional[Candidate]:
    return db.query(Candidate).filter(Candidate.id == candidate_id).first()


def get_by_email_and_test(db: Session, email: str, test_id: int) -> Optional[Candidate]:
    """Look up the attempt for an (email, test) pair."""
    return db.query(Candidate).filter(
        Candidate.email == normalize_email(email),
        Candidate.test_id == test_id
    ).first()


def get_multi(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    test_id: Optional[int] = None,
    status: Optional[CandidateStatus] = None
) -> List[Candidate]:
    """
    Retrieve attempts, most recently started first, with optional filters.
    """
    query = db.query(Candidate)

    if test_id is not None:
        query = query.filter(Candidate.test_id == test_id)
    if status:
        query = query.filter(Candidate.status == status)

    return query.order_by(Candidate.started_at.desc(), Candidate.id.desc()).offset(skip).limit(limit).all()


def delete(db: Session, candidate_id: int) -> bool:
    """
    Delete an attempt by ID.

    Returns:
        True if deleted, False if not found
    """
    candidate = get_by_id(db, candidate_id)
    if not candidate:
        return False

    db.delete(candidate)
    db.commit()

    return True
