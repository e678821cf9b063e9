from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime


def _clean_skills(v: Optional[List[str]]) -> Optional[List[str]]:
    if v is None:
        return v
    skills = [skill.strip() for skill in v if skill and skill.strip()]
    if not skills:
        raise ValueError("At least one skill is required")
    return skills


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=10)
    experience: str = Field(..., min_length=1, max_length=100, description="e.g. '2-4 years'")
    skills: List[str] = Field(..., min_length=1)

    @field_validator("skills")
    @classmethod
    def validate_skills(cls, v: List[str]) -> List[str]:
        return _clean_skills(v)


class JobUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=10)
    experience: Optional[str] = Field(None, min_length=1, max_length=100)
    skills: Optional[List[str]] = None

    @field_validator("skills")
    @classmethod
    def validate_skills(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return _clean_skills(v)


class JobResponse(BaseModel):
    """Schema for job response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    experience: str
    skills: List[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class JobDetailsRequest(BaseModel):
    """Title to draft a job posting from"""
    title: str = Field(..., min_length=1, max_length=200)


class JobDetailsResponse(BaseModel):
    """AI-drafted job posting fields, for the admin to review before saving"""
    description: str
    skills: List[str]
    experience: str
