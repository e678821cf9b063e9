"""
User model for administrator authentication.

Admins create jobs, generate tests and approve reappearance requests.
Candidates never hold accounts; they are identified per test by e-mail.
"""

import uuid
from sqlalchemy import Column, String, Boolean, DateTime, Uuid, func
from app.core.database import Base


class User(Base):
    """
    Authenticated account. Only users with is_admin=True can reach the
    admin-gated endpoints.
    """
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)

    # Authentication credentials
    email = Column(String, unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)

    full_name = Column(String, nullable=True)

    # Account status
    is_active = Column(Boolean, default=True, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_login_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', is_admin={self.is_admin})>"
