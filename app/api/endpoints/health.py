"""
Health check and monitoring endpoints.

Provides health status for the database and basic assessment counts.
"""

import logging
from typing import Dict, Any
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from sqlalchemy import text, func
from datetime import datetime, timezone

from app.core.database import get_db
from app.models.candidate import Candidate, CandidateStatus
from app.models.job import Job
from app.models.test import Test

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    Use this for simple uptime monitoring and load balancer health checks.
    """
    return {
        "status": "healthy",
        "timestamp": _timestamp()
    }


@router.get("/health/detailed", status_code=status.HTTP_200_OK)
async def detailed_health_check(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Detailed health check with database connectivity.

    Returns 200 with "unhealthy" in the body when a check fails.
    """
    health_status = {
        "status": "healthy",
        "timestamp": _timestamp(),
        "checks": {}
    }

    try:
        db.execute(text("SELECT 1"))
        health_status["checks"]["database"] = {
            "status": "healthy",
            "message": "Database connection successful"
        }
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": f"Database error: {str(e)}"
        }

    return health_status


@router.get("/metrics", status_code=status.HTTP_200_OK)
async def get_metrics(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Basic operational counts: jobs, tests, and candidate attempts by status.
    """
    try:
        by_status = dict(
            db.query(Candidate.status, func.count(Candidate.id))
            .group_by(Candidate.status)
            .all()
        )

        return {
            "timestamp": _timestamp(),
            "metrics": {
                "total_jobs": db.query(func.count(Job.id)).scalar() or 0,
                "total_tests": db.query(func.count(Test.id)).scalar() or 0,
                "total_candidates": sum(by_status.values()),
                "candidates_by_status": {
                    s.value: by_status.get(s, 0) for s in CandidateStatus
                },
            }
        }
    except Exception as e:
        logger.error(f"Failed to retrieve metrics: {e}")
        return {
            "error": "Failed to retrieve metrics",
            "message": str(e)
        }
