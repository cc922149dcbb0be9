"""
Tests for the error-response contract, pages and static assets.
"""

import json

import pytest

from fastapi.testclient import TestClient

from in_n_out_books.db.store import InMemoryStore
from in_n_out_books.errors import AuthError, NotFoundError, ValidationError, outcome_for, to_response
from in_n_out_books.main import create_app
from in_n_out_books.models.outcome_model import (
    BadRequest,
    NotFound,
    ServerError,
    Success,
    Unauthorized,
)


class BrokenStore(InMemoryStore):
    async def find_all(self):
        raise RuntimeError("store offline")

    async def find_one(self, key):
        raise RuntimeError("store offline")


def _body(response):
    return json.loads(response.body)


def test_outcome_mapping():
    assert to_response(Success({"a": 1})).status_code == 200
    assert to_response(Success({"id": 1}, status_code=201)).status_code == 201
    no_content = to_response(Success(status_code=204))
    assert no_content.status_code == 204
    assert no_content.body == b""
    assert _body(to_response(BadRequest("bad"))) == {"message": "bad"}
    assert _body(to_response(NotFound())) == {"message": "Book not found."}
    assert to_response(Unauthorized()).status_code == 401
    assert _body(to_response(Unauthorized())) == {"message": "Unauthorized"}


def test_server_error_stack_is_optional():
    try:
        raise RuntimeError("boom")
    except RuntimeError as exc:
        error = exc
    hidden = to_response(ServerError(error))
    assert hidden.status_code == 500
    assert _body(hidden) == {"message": "boom"}
    shown = _body(to_response(ServerError(error), include_stack=True))
    assert shown["message"] == "boom"
    assert "RuntimeError: boom" in shown["stack"]


def test_outcome_for_exceptions():
    assert outcome_for(ValidationError("nope")) == BadRequest("nope")
    assert outcome_for(NotFoundError()) == NotFound()
    assert outcome_for(AuthError()) == Unauthorized()
    fault = KeyError("x")
    assert outcome_for(fault) == ServerError(fault)


def test_landing_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "<h1>Welcome to In-N-Out Books</h1>" in response.text


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "env": "development"}


def test_static_stylesheet(client):
    response = client.get("/styles.css")
    assert response.status_code == 200
    assert "text/css" in response.headers["content-type"]


def test_unmatched_route_returns_html_404(client):
    response = client.get("/non-existent-path")
    assert response.status_code == 404
    assert "text/html" in response.headers["content-type"]
    assert "404 - Page Not Found" in response.text


def test_error_route_in_development(client):
    response = client.get("/error")
    assert response.status_code == 500
    data = response.json()
    assert data["message"] == "Test error"
    assert "stack" in data


def test_error_route_outside_development(production_settings, book_store, user_store):
    client = TestClient(create_app(production_settings, book_store, user_store))
    response = client.get("/error")
    assert response.status_code == 500
    assert response.json() == {"message": "Test error"}


def test_handler_fault_is_mapped_to_500(settings, user_store, caplog):
    client = TestClient(create_app(settings, BrokenStore(), user_store))
    with caplog.at_level("ERROR"):
        response = client.get("/api/books")
    assert response.status_code == 500
    data = response.json()
    assert data["message"] == "store offline"
    assert "RuntimeError" in data["stack"]
    assert "Unhandled error on GET /api/books" in caplog.text


def test_handler_fault_hides_stack_outside_development(production_settings, user_store):
    client = TestClient(create_app(production_settings, BrokenStore(), user_store))
    response = client.get("/api/books/1")
    assert response.status_code == 500
    assert response.json() == {"message": "store offline"}


def test_validation_runs_before_store_access(settings, user_store):
    client = TestClient(create_app(settings, BrokenStore(), user_store))
    response = client.get("/api/books/abc")
    assert response.status_code == 400


@pytest.mark.parametrize(
    "method, path",
    [("post", "/non-existent"), ("delete", "/api/books"), ("put", "/non-existent"), ("patch", "/api/books/1")],
)
def test_unmatched_method_and_path_returns_html_404(client, method, path):
    response = getattr(client, method)(path)
    assert response.status_code == 404
    assert "text/html" in response.headers["content-type"]
    assert "404 - Page Not Found" in response.text


def test_head_still_serves_static_files(client):
    assert client.head("/styles.css").status_code == 200
