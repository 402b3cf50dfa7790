"""Dependency providers used by FastAPI endpoints.

Route handlers receive their collaborators through FastAPI's dependency
injection so tests can swap them with `app.dependency_overrides`.
"""

from app.services.users import UserService


def get_user_service() -> UserService:
    """Return a UserService bound to the default user record."""
    return UserService()
