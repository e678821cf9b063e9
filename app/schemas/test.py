"""
Pydantic schemas for tests and their questions.

Three question shapes exist:
- GeneratedQuestion: LLM output, correct answer as letter or index, normalized to an index
- QuestionAdminView: admin-facing, correct answer shown as a letter
- CandidateQuestion: candidate-facing, no answer or explanation
"""

from datetime import datetime
from typing import Any, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from app.models.test import TestComplexity
from app.services.scoring import OPTIONS_PER_QUESTION, index_to_letter, normalize_correct_answer


class GeneratedQuestion(BaseModel):
    """A single multiple-choice question as produced by the generator."""
    question: str = Field(..., min_length=1)
    options: List[str] = Field(..., min_length=OPTIONS_PER_QUESTION, max_length=OPTIONS_PER_QUESTION)
    correct_answer: int = Field(..., validation_alias=AliasChoices("correct_answer", "correctAnswer"))
    explanation: Optional[str] = None

    @field_validator("correct_answer", mode="before")
    @classmethod
    def normalize_answer(cls, v: Any) -> int:
        return normalize_correct_answer(v)


class QuestionAdminView(BaseModel):
    question: str
    options: List[str]
    correct_answer: str
    explanation: Optional[str] = None

    @field_validator("correct_answer", mode="before")
    @classmethod
    def as_letter(cls, v: Any) -> str:
        return index_to_letter(normalize_correct_answer(v))


class CandidateQuestion(BaseModel):
    question: str
    options: List[str]


class TestGenerateRequest(BaseModel):
    """Schema for generating a new test for a job"""
    job_id: int
    complexity: TestComplexity


class TestGenerateResponse(BaseModel):
    test_id: int
    short_code: Optional[str] = None
    question_count: int


class TestResponse(BaseModel):
    """Admin listing entry (pool not included)"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    job_id: int
    complexity: TestComplexity
    short_code: Optional[str] = None
    question_count: int
    created_at: Optional[datetime] = None


class TestPublicResponse(BaseModel):
    """What a candidate link resolves to before the attempt starts"""
    id: int
    job_id: int
    job_title: str
    complexity: TestComplexity
    short_code: Optional[str] = None
    question_count: int
    questions_per_candidate: int
    duration_minutes: int


class TestQuestionsResponse(BaseModel):
    """Admin view of the full question pool"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    job_id: int
    complexity: TestComplexity
    questions: List[QuestionAdminView]
