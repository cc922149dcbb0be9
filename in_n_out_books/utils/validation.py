"""Request validation checks.

Every check is a pure function returning a ``Verdict``; ``require``
turns a failed verdict into a ``ValidationError`` for the handlers.
"""
import re
from typing import Any, List

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from in_n_out_books.errors import INVALID_BODY, ValidationError
from in_n_out_books.models.outcome_model import Verdict
from in_n_out_books.models.user_model import SecurityAnswer

INVALID_BOOK_ID = "Invalid book ID. Please provide a valid number."
TITLE_REQUIRED = "Book title is required."
CREDENTIALS_REQUIRED = "Email and password are required."

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_ANSWERS = TypeAdapter(List[SecurityAnswer])


def require(verdict: Verdict) -> None:
    if not verdict.valid:
        raise ValidationError(verdict.reason)


def _present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def validate_book_id(raw: str) -> Verdict:
    """The id route parameter must be a base-10 integer. Existence is the store's business."""
    if not isinstance(raw, str) or not _INTEGER_RE.fullmatch(raw):
        return Verdict.failed(INVALID_BOOK_ID)
    try:
        int(raw, 10)
    except ValueError:
        # Past the interpreter's int string conversion limit
        return Verdict.failed(INVALID_BOOK_ID)
    return Verdict.passed()


def parse_book_id(raw: str) -> int:
    require(validate_book_id(raw))
    return int(raw, 10)


def validate_book_payload(body: Any) -> Verdict:
    if not isinstance(body, dict) or not _present(body.get("title")):
        return Verdict.failed(TITLE_REQUIRED)
    author = body.get("author")
    if author is not None and not isinstance(author, str):
        return Verdict.failed(INVALID_BODY)
    return Verdict.passed()


def validate_login_payload(body: Any) -> Verdict:
    if not isinstance(body, dict):
        return Verdict.failed(CREDENTIALS_REQUIRED)
    if not (_present(body.get("email")) and _present(body.get("password"))):
        return Verdict.failed(CREDENTIALS_REQUIRED)
    return Verdict.passed()


def unwrap_answers(body: Any) -> Any:
    """Accept either a bare answers array or ``{"answers": [...]}``."""
    if isinstance(body, dict) and set(body) == {"answers"}:
        return body["answers"]
    return body


def validate_security_answers(body: Any) -> Verdict:
    try:
        _ANSWERS.validate_python(unwrap_answers(body))
    except SchemaError:
        return Verdict.failed(INVALID_BODY)
    return Verdict.passed()


def parse_security_answers(body: Any) -> List[SecurityAnswer]:
    require(validate_security_answers(body))
    return _ANSWERS.validate_python(unwrap_answers(body))
