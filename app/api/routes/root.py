"""Root route answering uptime checks."""

from fastapi import APIRouter

from app.schemas.common import Message

ROOT_MESSAGE = "This is the backend for the continuous assessment"

router = APIRouter(tags=["root"])


@router.get("/", response_model=Message)
async def read_root() -> Message:
    """Lightweight health endpoint used by uptime monitors."""
    return Message(message=ROOT_MESSAGE)
