"""User models."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, StrictStr


class SecurityQuestion(BaseModel):
    question: str
    answer: str


class SecurityAnswer(BaseModel):
    """One submitted answer. Anything besides a single string ``answer`` is rejected."""

    model_config = ConfigDict(extra="forbid")

    answer: StrictStr


class User(BaseModel):
    """Stored user record. ``password`` holds the bcrypt hash and is never serialized to clients."""

    id: int
    email: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    security_questions: List[SecurityQuestion] = []

    model_config = {"from_attributes": True}


class UserLogin(BaseModel):
    email: str
    password: str
