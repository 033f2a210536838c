"""Small response bodies shared by several routers."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Status-only response returned by state-transition endpoints."""

    message: str
