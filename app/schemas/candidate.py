"""
Pydantic schemas for the candidate test-session API.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.models.candidate import CandidateStatus
from app.schemas.test import CandidateQuestion, QuestionAdminView


class CandidateStartRequest(BaseModel):
    test_id: int
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v


class CandidateStartResponse(BaseModel):
    candidate_id: int


class CandidateSubmitRequest(BaseModel):
    candidate_id: int
    answers: List[Optional[int]] = Field(..., description="Selected option index per question, null if unanswered")


class SubmitResultResponse(BaseModel):
    score: int
    total: int
    percentage: int
    passed: bool


class CandidateLockoutRequest(BaseModel):
    candidate_id: int
    reason: str = Field(..., min_length=1, max_length=500, description="e.g. 'tab_switch'")
    answers: Optional[List[Optional[int]]] = None


class CandidateIdRequest(BaseModel):
    candidate_id: int


class SuccessResponse(BaseModel):
    success: bool = True


class CandidateStatusRequest(BaseModel):
    test_id: int
    email: EmailStr


class CandidatePublicResponse(BaseModel):
    """Candidate-safe view of an attempt (no correct answers)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    test_id: int
    name: str
    email: str
    status: CandidateStatus
    questions: List[CandidateQuestion] = []
    answers: Optional[List[Optional[int]]] = None
    score: Optional[int] = None
    total_questions: Optional[int] = None
    lockout_reason: Optional[str] = None
    reappearance_approved_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @field_validator("questions", mode="before")
    @classmethod
    def default_questions(cls, v):
        return v or []


class CandidateStatusResponse(BaseModel):
    exists: bool
    candidate: Optional[CandidatePublicResponse] = None


class CandidateResponse(BaseModel):
    """Admin view of an attempt, including the assigned questions with answers."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    test_id: int
    name: str
    email: str
    status: CandidateStatus
    questions: List[QuestionAdminView] = []
    answers: Optional[List[Optional[int]]] = None
    score: Optional[int] = None
    total_questions: Optional[int] = None
    lockout_reason: Optional[str] = None
    reappearance_requested_at: Optional[datetime] = None
    reappearance_approved_at: Optional[datetime] = None
    reappearance_approved_by: Optional[UUID] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @field_validator("questions", mode="before")
    @classmethod
    def default_questions(cls, v):
        return v or []


class CandidateListResponse(BaseModel):
    """Compact admin listing entry."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    test_id: int
    name: str
    email: str
    status: CandidateStatus
    score: Optional[int] = None
    total_questions: Optional[int] = None
    lockout_reason: Optional[str] = None
    reappearance_requested_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
