"""Response envelopes shared by every route."""

from pydantic import BaseModel


class Message(BaseModel):
    """Envelope holding a single human-readable `message`; the root payload."""

    message: str
