"""Read-only access to the fixed user record served by the API."""

from dataclasses import dataclass

from app.schemas.users import UserData, UsersResponse

USERS_MESSAGE = "This is the users endpoint"


@dataclass(frozen=True)
class User:
    name: str
    email: str


DEFAULT_USER = User(name="John Doe", email="john.doe@example.com")


class UserService:
    """Builds users payloads around a single, immutable user record."""

    def __init__(self, user: User = DEFAULT_USER):
        self.user = user

    def get_user(self) -> User:
        return self.user

    def users_response(self) -> UsersResponse:
        """Return a fresh payload for `GET /api/v1/users`."""
        return UsersResponse(
            message=USERS_MESSAGE,
            data=UserData.model_validate(self.user),
        )
