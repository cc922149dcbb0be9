"""Error taxonomy and the outcome-to-response mapping.

Handlers raise ``ValidationError``, ``NotFoundError`` or ``AuthError`` for
expected failures. Anything else escaping a handler is an unexpected fault:
it is logged with its traceback and answered with a 500 whose ``stack``
field is only present in development mode.

Two boundaries apply the mapping:

* ``FaultBoundaryRoute`` wraps every API route individually.
* ``catch_unhandled_faults`` is the application-wide last resort for
  faults raised outside a guarded route (framework glue, ``/error``).
"""
import traceback
from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.routing import APIRoute
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from in_n_out_books.models.outcome_model import (
    BOOK_NOT_FOUND,
    UNAUTHORIZED,
    BadRequest,
    NotFound,
    Outcome,
    ServerError,
    Success,
    Unauthorized,
)
from in_n_out_books.utils.logger import get_logger

logger = get_logger(__name__)

INVALID_BODY = "Bad Request: Invalid request body"

NOT_FOUND_PAGE = """
        <h1>404 - Page Not Found</h1>
        <p>Sorry, the page you are looking for does not exist.</p>
"""


class ApiError(Exception):
    """Base class for expected, client-facing failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_outcome(self) -> Outcome:
        raise NotImplementedError


class ValidationError(ApiError):
    """Client-supplied data is malformed or missing."""

    def to_outcome(self) -> Outcome:
        return BadRequest(self.message)


class NotFoundError(ApiError):
    """A referenced book does not exist."""

    def __init__(self, message: str = BOOK_NOT_FOUND) -> None:
        super().__init__(message)

    def to_outcome(self) -> Outcome:
        return NotFound(self.message)


class AuthError(ApiError):
    """Bad or missing credentials, unknown user, or mismatched answers."""

    def __init__(self, message: str = UNAUTHORIZED) -> None:
        super().__init__(message)

    def to_outcome(self) -> Outcome:
        return Unauthorized(self.message)


def outcome_for(exc: BaseException) -> Outcome:
    if isinstance(exc, ApiError):
        return exc.to_outcome()
    return ServerError(exc)


def format_stack(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def to_response(outcome: Outcome, include_stack: bool = False) -> Response:
    """Translate an outcome into the HTTP response every endpoint agrees on."""
    if isinstance(outcome, Success):
        if outcome.status_code == 204:
            return Response(status_code=204)
        return JSONResponse(jsonable_encoder(outcome.payload), status_code=outcome.status_code)
    if isinstance(outcome, BadRequest):
        return JSONResponse({"message": outcome.reason}, status_code=400)
    if isinstance(outcome, NotFound):
        return JSONResponse({"message": outcome.message}, status_code=404)
    if isinstance(outcome, Unauthorized):
        return JSONResponse({"message": outcome.message}, status_code=401)
    if isinstance(outcome, ServerError):
        body = {"message": str(outcome.cause)}
        if include_stack:
            body["stack"] = format_stack(outcome.cause)
        return JSONResponse(body, status_code=500)
    raise TypeError(f"Unknown outcome: {outcome!r}")


def _is_development(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.is_development)


def fault_response(exc: BaseException, request: Request) -> Response:
    """Log an unexpected fault, then answer with a structured 500."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return to_response(ServerError(exc), include_stack=_is_development(request))


class FaultBoundaryRoute(APIRoute):
    """Route class that maps domain errors and faults for its handler."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def guarded(request: Request) -> Response:
            try:
                return await handler(request)
            except (StarletteHTTPException, RequestValidationError):
                raise
            except ApiError as exc:
                return to_response(outcome_for(exc))
            except Exception as exc:
                return fault_response(exc, request)

        return guarded


async def catch_unhandled_faults(request: Request, call_next) -> Response:
    try:
        return await call_next(request)
    except Exception as exc:
        return fault_response(exc, request)


async def _api_error_handler(request: Request, exc: ApiError) -> Response:
    return to_response(outcome_for(exc))


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> Response:
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    return to_response(BadRequest(INVALID_BODY))


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 404:
        return HTMLResponse(NOT_FOUND_PAGE, status_code=404)
    return JSONResponse({"message": exc.detail}, status_code=exc.status_code, headers=exc.headers)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.middleware("http")(catch_unhandled_faults)


class PublicFiles(StaticFiles):
    """Static assets mounted at ``/``. Only GET/HEAD can hit a file; anything else is a route miss."""

    async def get_response(self, path: str, scope) -> Response:
        if scope["method"] not in ("GET", "HEAD"):
            raise StarletteHTTPException(status_code=404)
        return await super().get_response(path, scope)
