"""FastAPI dependencies resolving the stores and settings attached to the app."""
from fastapi import Request

from in_n_out_books.config import Settings
from in_n_out_books.db.store import RecordStore


def get_book_store(request: Request) -> RecordStore:
    return request.app.state.book_store


def get_user_store(request: Request) -> RecordStore:
    return request.app.state.user_store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
