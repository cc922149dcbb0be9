"""API routers package."""
from fastapi import APIRouter

from . import auth, books, users

router = APIRouter()
router.include_router(books.router, prefix="/api/books", tags=["books"])
router.include_router(auth.router, prefix="/api", tags=["auth"])
router.include_router(users.router, prefix="/api/users", tags=["users"])
