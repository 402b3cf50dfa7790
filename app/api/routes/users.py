"""HTTP route handlers for the users endpoint."""

from fastapi import APIRouter, Depends

from app.api import deps
from app.schemas.users import UsersResponse
from app.services.users import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=UsersResponse)
async def read_users(
    user_service: UserService = Depends(deps.get_user_service),
) -> UsersResponse:
    """Return the fixed user record wrapped in a message envelope."""

    return user_service.users_response()
