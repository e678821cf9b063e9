"""
Database models package.
"""

from app.models.user import User
from app.models.job import Job
from app.models.test import Test, TestComplexity
from app.models.candidate import Candidate, CandidateStatus

__all__ = ["User", "Job", "Test", "TestComplexity", "Candidate", "CandidateStatus"]
