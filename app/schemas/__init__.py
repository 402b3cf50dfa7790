from app.schemas.common import Message
from app.schemas.users import UserData, UsersResponse

__all__ = [
    "Message",
    "UserData",
    "UsersResponse",
]
