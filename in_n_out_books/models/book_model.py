"""Book models."""
from typing import Optional

from pydantic import BaseModel


class Book(BaseModel):
    id: int
    title: str
    author: Optional[str] = None

    model_config = {"from_attributes": True}


class BookPayload(BaseModel):
    """Fields a client may send on create/update. The id is always server-assigned."""

    title: str
    author: Optional[str] = None

    model_config = {"extra": "ignore"}
