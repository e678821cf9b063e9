"""
CRUD operations for Test model.
"""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from app.models.test import Test, TestComplexity
from app.services.short_code import generate_short_code

logger = logging.getLogger(__name__)


def create_with_short_code(
    db: Session,
    job_id: int,
    complexity: TestComplexity,
    questions: List[Dict[str, Any]],
) -> Test:
    """
    Persist a generated test and assign its short code.

    The short code is derived from the id, so the row is flushed first; row
    and code are committed together. On a short-code clash the test is kept
    without a code.
    """
    db_test = Test(job_id=job_id, complexity=complexity, questions=questions)
    db.add(db_test)
    db.flush()

    short_code = generate_short_code(db_test.id)
    if get_by_short_code(db, short_code) is None:
        db_test.short_code = short_code
    else:
        logger.warning(f"Short code {short_code} already taken, test {db_test.id} saved without one")

    db.commit()
    db.refresh(db_test)

    return db_test


def get_by_id(db: Session, test_id: int) -> Optional[Test]:
    return db.query(Test).filter(Test.id == test_id).first()


def get_by_short_code(db: Session, short_code: str) -> Optional[Test]:
    return db.query(Test).filter(Test.short_code == short_code.upper()).first()


def get_multi(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    job_id: Optional[int] = None
) -> List[Test]:
    """
    Retrieve tests newest first, optionally filtered by job.
    """
    query = db.query(Test)

    if job_id is not None:
        query = query.filter(Test.job_id == job_id)

    return query.order_by(Test.created_at.desc(), Test.id.desc()).offset(skip).limit(limit).all()


def delete(db: Session, test_id: int) -> bool:
    """
    Delete a test by ID, along with every candidate attempt on it.

    Returns:
        True if deleted, False if not found
    """
    test = get_by_id(db, test_id)
    if not test:
        return False

    db.delete(test)
    db.commit()

    return True
