"""Pydantic schemas for the users endpoint."""

from pydantic import BaseModel, ConfigDict, EmailStr

from app.schemas.common import Message


class UserData(BaseModel):
    """Public fields of a user record."""

    name: str
    email: EmailStr

    model_config = ConfigDict(from_attributes=True)


class UsersResponse(Message):
    """Message envelope carrying a single user under `data`."""

    data: UserData
