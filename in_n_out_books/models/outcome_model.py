"""Validation verdicts and handler outcomes.

Both are short-lived values: a ``Verdict`` is what a validation check
returns, an ``Outcome`` is what a handler produced before it is turned
into an HTTP response by ``errors.to_response``.
"""
from dataclasses import dataclass
from typing import Any, Union

BOOK_NOT_FOUND = "Book not found."
UNAUTHORIZED = "Unauthorized"


@dataclass(frozen=True)
class Verdict:
    valid: bool
    reason: str = ""

    @classmethod
    def passed(cls) -> "Verdict":
        return cls(valid=True)

    @classmethod
    def failed(cls, reason: str) -> "Verdict":
        return cls(valid=False, reason=reason)


@dataclass(frozen=True)
class Success:
    payload: Any = None
    status_code: int = 200


@dataclass(frozen=True)
class NotFound:
    message: str = BOOK_NOT_FOUND


@dataclass(frozen=True)
class BadRequest:
    reason: str


@dataclass(frozen=True)
class Unauthorized:
    message: str = UNAUTHORIZED


@dataclass(frozen=True)
class ServerError:
    cause: BaseException


Outcome = Union[Success, NotFound, BadRequest, Unauthorized, ServerError]
