"""Tests for the users service and response schemas."""

import dataclasses

import pytest
from pydantic import ValidationError

from app.schemas.users import UserData
from app.services.users import DEFAULT_USER, USERS_MESSAGE, UserService


class TestUserService:
    def test_default_user(self):
        user = UserService().get_user()

        assert user.name == "John Doe"
        assert user.email == "john.doe@example.com"

    def test_default_user_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_USER.name = "Someone Else"

    def test_users_response_is_built_fresh(self):
        service = UserService()

        first = service.users_response()
        second = service.users_response()

        assert first is not second
        assert first == second
        assert first.message == USERS_MESSAGE


class TestUserData:
    def test_rejects_invalid_email(self):
        with pytest.raises(ValidationError):
            UserData(name="John Doe", email="not-an-email")
