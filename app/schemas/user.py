"""
Pydantic schemas for admin authentication and registration.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, UUID4, field_validator
from typing import Optional
from datetime import datetime
import re


class UserRegisterRequest(BaseModel):
    """Request schema for user registration."""
    email: EmailStr
    password: str = Field(
        ...,
        min_length=8,
        max_length=72,  # bcrypt limit
        description="Password must be 8-72 characters with uppercase, lowercase and a number"
    )
    full_name: Optional[str] = None

    @field_validator('password')
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        """Validate password contains required character types."""
        if not re.search(r'[a-z]', v):
            raise ValueError('Password must contain at least one lowercase letter')
        if not re.search(r'[A-Z]', v):
            raise ValueError('Password must contain at least one uppercase letter')
        if not re.search(r'\d', v):
            raise ValueError('Password must contain at least one number')
        return v


class UserLoginRequest(BaseModel):
    """Request schema for user login."""
    username: EmailStr  # OAuth2 naming, holds the e-mail
    password: str


class UserResponse(BaseModel):
    """User profile response (no sensitive data)."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID4
    email: str
    full_name: Optional[str] = None
    is_active: bool
    is_admin: bool
    created_at: Optional[datetime] = None


class TokenResponse(BaseModel):
    """JWT token response."""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user: Optional[UserResponse] = None


class TokenRefreshRequest(BaseModel):
    """Request schema for refreshing access token."""
    refresh_token: str
