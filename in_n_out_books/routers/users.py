"""User endpoints."""
from typing import Any

from fastapi import APIRouter, Body, Depends

from in_n_out_books.db.store import RecordStore
from in_n_out_books.errors import FaultBoundaryRoute
from in_n_out_books.services import auth_service
from in_n_out_books.utils.dependencies import get_user_store
from in_n_out_books.utils.validation import parse_security_answers

router = APIRouter(route_class=FaultBoundaryRoute)


@router.post("/{email}/verify-security-question")
async def verify_security_question(
    email: str,
    body: Any = Body(default=None),
    store: RecordStore = Depends(get_user_store),
):
    """Check submitted answers against the user's security questions, in order.

    The body is an array of ``{"answer": str}`` objects, optionally wrapped
    as ``{"answers": [...]}``. All answers must match; there is no partial credit.
    """
    answers = parse_security_answers(body)
    await auth_service.verify_security_answers(store, email, answers)
    return {"message": "Security questions successfully answered"}
