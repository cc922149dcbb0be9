"""Pydantic models for API requests and responses."""
from .book_model import Book, BookPayload
from .outcome_model import BadRequest, NotFound, Outcome, ServerError, Success, Unauthorized, Verdict
from .user_model import SecurityAnswer, SecurityQuestion, User, UserLogin
