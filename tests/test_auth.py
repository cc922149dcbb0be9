"""
Tests for login and security question verification.
"""

import pytest

from in_n_out_books.models.user_model import SecurityAnswer, User
from in_n_out_books.services.auth_service import answers_match

HARRY_ANSWERS = [
    {"answer": "Hedwig"},
    {"answer": "Quidditch Through the Ages"},
    {"answer": "Evans"},
]


def test_login_success(client):
    response = client.post("/api/login", json={"email": "harry@hogwarts.edu", "password": "potter"})
    assert response.status_code == 200
    assert response.json() == {"message": "Authentication successful"}


def test_login_response_never_contains_password(client):
    response = client.post("/api/login", json={"email": "harry@hogwarts.edu", "password": "potter"})
    assert "potter" not in response.text
    assert "$2b$" not in response.text


def test_login_wrong_password(client):
    response = client.post("/api/login", json={"email": "harry@hogwarts.edu", "password": "malfoy"})
    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


def test_login_unknown_user(client):
    response = client.post("/api/login", json={"email": "draco@hogwarts.edu", "password": "potter"})
    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


@pytest.mark.parametrize(
    "body",
    [{"email": "harry@hogwarts.edu"}, {"password": "potter"}, {}],
)
def test_login_missing_fields(client, body):
    response = client.post("/api/login", json=body)
    assert response.status_code == 400
    assert response.json() == {"message": "Email and password are required."}


def test_verify_security_questions(client):
    response = client.post("/api/users/harry@hogwarts.edu/verify-security-question", json=HARRY_ANSWERS)
    assert response.status_code == 200
    assert response.json() == {"message": "Security questions successfully answered"}


def test_verify_security_questions_wrapped_body(client):
    response = client.post(
        "/api/users/harry@hogwarts.edu/verify-security-question", json={"answers": HARRY_ANSWERS}
    )
    assert response.status_code == 200


def test_verify_security_questions_mismatch(client):
    answers = [dict(a) for a in HARRY_ANSWERS]
    answers[2]["answer"] = "Dursley"
    response = client.post("/api/users/harry@hogwarts.edu/verify-security-question", json=answers)
    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}


def test_verify_security_questions_out_of_order(client):
    response = client.post(
        "/api/users/harry@hogwarts.edu/verify-security-question", json=list(reversed(HARRY_ANSWERS))
    )
    assert response.status_code == 401


def test_verify_security_questions_unknown_user(client):
    response = client.post("/api/users/draco@hogwarts.edu/verify-security-question", json=HARRY_ANSWERS)
    assert response.status_code == 401


@pytest.mark.parametrize(
    "body",
    [
        [{"answer": "Hedwig", "extra": "field"}],
        [{"answer": 1}],
        {"answer": "Hedwig"},
        "Hedwig",
    ],
)
def test_verify_security_questions_bad_body(client, body):
    response = client.post("/api/users/harry@hogwarts.edu/verify-security-question", json=body)
    assert response.status_code == 400
    assert response.json() == {"message": "Bad Request: Invalid request body"}


def test_answers_match_requires_same_length():
    user = User(
        id=1,
        email="a@b.c",
        password="x",
        security_questions=[{"question": "Q1", "answer": "A1"}, {"question": "Q2", "answer": "A2"}],
    )
    assert answers_match(user, [SecurityAnswer(answer="A1"), SecurityAnswer(answer="A2")])
    assert not answers_match(user, [SecurityAnswer(answer="A1")])
    assert not answers_match(user, [SecurityAnswer(answer="a1"), SecurityAnswer(answer="A2")])


def test_login_whitespace_password_reaches_credential_check(client):
    response = client.post("/api/login", json={"email": "harry@hogwarts.edu", "password": "  "})
    assert response.status_code == 401
    assert response.json() == {"message": "Unauthorized"}
