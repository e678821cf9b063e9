"""
Unit tests for authentication endpoints.

Tests:
- Registration (admin promotion via ADMIN_EMAILS)
- Login
- Token refresh
- Current user profile
"""

import uuid
from datetime import timedelta

from app.core.config import settings
from app.core.security import create_access_token, create_refresh_token, verify_password
from app.models.user import User
from conftest import ADMIN_PASSWORD


class TestUserRegistration:
    """Test user registration endpoint"""

    def test_register_success(self, client, db_session):
        """Test successful user registration"""
        response = client.post(
            "/api/v1/auth/register",
            json={
                "email": "Recruiter@Example.com",
                "password": "SecurePass123",
                "full_name": "Test User"
            }
        )

        assert response.status_code == 201
        data = response.json()
        assert "access_token" in data
        assert "refresh_token" in data
        assert data["token_type"] == "bearer"
        assert data["user"]["email"] == "recruiter@example.com"
        assert data["user"]["is_admin"] is False

        user = db_session.query(User).filter(User.email == "recruiter@example.com").first()
        assert user is not None
        assert verify_password("SecurePass123", user.hashed_password)

    def test_register_admin_email(self, client, monkeypatch):
        """Accounts registered with a configured admin e-mail become admins"""
        monkeypatch.setattr(settings, "ADMIN_EMAILS", ["Boss@example.com"])

        response = client.post(
            "/api/v1/auth/register",
            json={"email": "boss@example.com", "password": "SecurePass123"}
        )

        assert response.status_code == 201
        assert response.json()["user"]["is_admin"] is True

    def test_register_duplicate_email(self, client, admin_user):
        """Test registration with duplicate email fails"""
        response = client.post(
            "/api/v1/auth/register",
            json={
                "email": admin_user.email,
                "password": "DifferentPass123"
            }
        )

        assert response.status_code == 400
        assert "already registered" in response.json()["detail"].lower()

    def test_register_weak_password(self, client):
        """Test registration with weak password fails"""
        response = client.post(
            "/api/v1/auth/register",
            json={
                "email": "test@example.com",
                "password": "weak"
            }
        )

        assert response.status_code == 422

    def test_register_invalid_email(self, client):
        """Test registration with invalid email fails"""
        response = client.post(
            "/api/v1/auth/register",
            json={
                "email": "not-an-email",
                "password": "SecurePass123"
            }
        )

        assert response.status_code == 422


class TestUserLogin:
    """Test user login endpoint"""

    def test_login_success(self, client, admin_user):
        response = client.post(
            "/api/v1/auth/login",
            json={"username": admin_user.email, "password": ADMIN_PASSWORD}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["access_token"]
        assert data["user"]["is_admin"] is True

    def test_login_wrong_password(self, client, admin_user):
        response = client.post(
            "/api/v1/auth/login",
            json={"username": admin_user.email, "password": "WrongPass123"}
        )

        assert response.status_code == 401
        assert "incorrect" in response.json()["detail"].lower()

    def test_login_unknown_user(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "nobody@example.com", "password": "Whatever123"}
        )

        assert response.status_code == 401

    def test_login_inactive_user(self, client, db_session, admin_user):
        admin_user.is_active = False
        db_session.commit()

        response = client.post(
            "/api/v1/auth/login",
            json={"username": admin_user.email, "password": ADMIN_PASSWORD}
        )

        assert response.status_code == 403


class TestTokenRefresh:
    """Test refresh token exchange"""

    def test_refresh_success(self, client, admin_user):
        refresh_token = create_refresh_token(data={"sub": str(admin_user.id)})

        response = client.post("/api/v1/auth/refresh", json={"refresh_token": refresh_token})

        assert response.status_code == 200
        assert response.json()["access_token"]

    def test_refresh_rejects_access_token(self, client, admin_user):
        """An access token cannot be used as a refresh token"""
        access_token = create_access_token(data={"sub": str(admin_user.id)})

        response = client.post("/api/v1/auth/refresh", json={"refresh_token": access_token})

        assert response.status_code == 401

    def test_refresh_invalid_token(self, client):
        response = client.post("/api/v1/auth/refresh", json={"refresh_token": "not-a-jwt"})

        assert response.status_code == 401

    def test_refresh_unknown_user(self, client, db_session):
        refresh_token = create_refresh_token(data={"sub": str(uuid.uuid4())})

        response = client.post("/api/v1/auth/refresh", json={"refresh_token": refresh_token})

        assert response.status_code == 401


class TestCurrentUser:
    """Test the /me endpoint and bearer token validation"""

    def test_me(self, client, admin_user, admin_headers):
        response = client.get("/api/v1/auth/me", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["email"] == admin_user.email

    def test_me_without_token(self, client):
        response = client.get("/api/v1/auth/me")

        assert response.status_code == 401

    def test_me_with_expired_token(self, client, admin_user):
        token = create_access_token(
            data={"sub": str(admin_user.id)},
            expires_delta=timedelta(minutes=-1)
        )

        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_me_with_refresh_token(self, client, admin_user):
        token = create_refresh_token(data={"sub": str(admin_user.id)})

        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
