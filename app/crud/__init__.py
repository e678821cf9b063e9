"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer separates API routes from database operations.
"""

from app.crud import job, test, candidate

__all__ = ["job", "test", "candidate"]
