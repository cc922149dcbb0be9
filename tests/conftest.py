"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from in_n_out_books.config import Settings
from in_n_out_books.db.seed import build_book_store, build_user_store
from in_n_out_books.main import create_app


@pytest.fixture
def settings():
    """Development settings with cheap bcrypt hashing."""
    return Settings(app_env="development", bcrypt_rounds=4, seed_data=True)


@pytest.fixture
def production_settings():
    return Settings(app_env="production", bcrypt_rounds=4, seed_data=True)


@pytest.fixture
def book_store():
    return build_book_store()


@pytest.fixture
def user_store():
    return build_user_store(rounds=4)


@pytest.fixture
def app(settings, book_store, user_store):
    return create_app(settings=settings, book_store=book_store, user_store=user_store)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)
