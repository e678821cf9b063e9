"""
Authentication endpoints for admin accounts.

- POST /register: Create a new account (admin if the e-mail is in ADMIN_EMAILS)
- POST /login: Authenticate and receive JWT tokens
- POST /refresh: Get new tokens using a refresh token
- GET /me: Get current user profile
"""

import logging
import uuid
from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.deps import get_current_user
from app.core.security import (
    JWTError,
    verify_password,
    get_password_hash,
    create_access_token,
    create_refresh_token,
    decode_token,
)
from app.models.user import User
from app.schemas.user import (
    UserRegisterRequest,
    UserLoginRequest,
    TokenResponse,
    TokenRefreshRequest,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


def _issue_tokens(user: User) -> TokenResponse:
    access_token = create_access_token(data={"sub": str(user.id), "is_admin": user.is_admin})
    refresh_token = create_refresh_token(data={"sub": str(user.id)})
    return TokenResponse(
        access_token=access_token,
        refresh_token=refresh_token,
        token_type="bearer",
        user=UserResponse.model_validate(user)
    )


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(
    request: UserRegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new account and return JWT tokens for immediate login.
    """
    email = request.email.lower()
    existing_user = db.query(User).filter(User.email == email).first()
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    admin_emails = {e.lower() for e in settings.ADMIN_EMAILS}
    new_user = User(
        id=uuid.uuid4(),
        email=email,
        hashed_password=get_password_hash(request.password),
        full_name=request.full_name,
        is_active=True,
        is_admin=email in admin_emails,
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info(f"New user registered: {new_user.email} (admin: {new_user.is_admin})")

    return _issue_tokens(new_user)


@router.post("/login", response_model=TokenResponse)
def login(
    request: UserLoginRequest,
    db: Session = Depends(get_db)
):
    """
    Validate e-mail/password and return access + refresh tokens.
    """
    user = db.query(User).filter(User.email == request.username.lower()).first()
    if not user or not verify_password(request.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is inactive. Please contact support."
        )

    user.last_login_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(user)

    logger.info(f"User logged in: {user.email}")

    return _issue_tokens(user)


@router.post("/refresh", response_model=TokenResponse)
def refresh_token(
    request: TokenRefreshRequest,
    db: Session = Depends(get_db)
):
    """
    Exchange a valid refresh token for a new token pair.
    """
    invalid_token = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired refresh token"
    )

    try:
        payload = decode_token(request.refresh_token)
        user_id = payload.get("sub")
        if user_id is None or payload.get("type") != "refresh":
            raise invalid_token
        user_uuid = uuid.UUID(user_id)
    except (JWTError, ValueError) as e:
        logger.error(f"Token refresh error: {e}")
        raise invalid_token

    user = db.query(User).filter(User.id == user_uuid).first()
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive"
        )

    return _issue_tokens(user)


@router.get("/me", response_model=UserResponse)
def get_current_user_profile(
    current_user: User = Depends(get_current_user)
):
    """Get the authenticated user's profile."""
    return current_user
