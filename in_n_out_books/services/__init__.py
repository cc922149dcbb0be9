"""Services package."""
from . import auth_service, book_service, user_service

__all__ = [
    "auth_service",
    "book_service",
    "user_service",
]
